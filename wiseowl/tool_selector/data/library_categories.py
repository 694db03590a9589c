"""
Library tool categories - keywords and tool ownership.

The taxonomy the assistant uses to narrow the backend tool manifest down
to what a query is about. Keywords are matched as lowercase substrings, so
multi-word phrases score by their word count.
"""

from ..constants import CategoryPriority
from ..models import Category

USERS = Category(
    id="users",
    display_name="Пользователи",
    icon="👤",
    description="Управление пользователями библиотеки",
    keywords=(
        "пользователь", "юзер", "клиент", "читатель", "студент", "человек", "люди",
        "создать пользователя", "добавить пользователя", "зарегистрировать",
        "найти пользователя", "показать пользователей", "список пользователей",
        "обновить пользователя", "изменить пользователя", "удалить пользователя",
        "профиль", "аккаунт", "регистрация", "авторизация", "рекомендации",
        "пароль", "сброс пароля", "изменить пароль", "штраф", "активность",
        "с книгами", "с просрочками", "активные резервирования", "просроченные",
        "статистика пользователей", "отчет по пользователям", "график пользователей",
    ),
    priority=CategoryPriority.CRITICAL,
    tool_names=(
        "getAllUsers",
        "getUserById",
        "searchUsers",
        "createUser",
        "updateUser",
        "deleteUser",
        "changeUserPassword",
        "resetUserPassword",
        "getUserReservations",
        "getUserActiveReservations",
        "getUserOverdueReservations",
        "getUserRecommendations",
        "getUsersWithBooks",
        "getUsersWithFines",
        "getUserStatistics",
    ),
)

BOOKS = Category(
    id="books",
    display_name="Книги",
    icon="📚",
    description="Управление каталогом книг",
    keywords=(
        "книга", "книги", "литература", "издание", "том", "экземпляр", "каталог",
        "добавить книгу", "создать книгу", "новая книга", "загрузить книгу",
        "найти книгу", "поиск книг", "показать книги", "список книг",
        "обновить книгу", "изменить книгу", "удалить книгу",
        "автор", "название", "жанр", "ISBN", "издательство", "год издания",
        "доступность", "экземпляры", "копии", "полка", "позиция", "состояние",
        "избранное", "рекомендации", "популярные", "статистика",
        "статистика книг", "отчет по книгам", "график книг", "топ книг", "популярные книги",
    ),
    priority=CategoryPriority.CRITICAL,
    tool_names=(
        "getAllBooks",
        "getBookById",
        "searchBooks",
        "createBook",
        "updateBook",
        "deleteBook",
        "updateBookGenre",
        "updateBookCategorization",
        "addBookToFavorites",
        "removeBookFromFavorites",
        "getBookAvailability",
        "getBestAvailableBookInstance",
        "getAllBookInstances",
        "getBookInstanceById",
        "getBookInstancesByBookId",
        "createBookInstance",
        "updateBookInstance",
        "deleteBookInstance",
        "updateBookInstanceStatus",
        "getBookInstanceStats",
        "createMultipleBookInstances",
        "autoCreateBookInstances",
        "getBookInstanceReservation",
        "getInstanceStatusSummary",
        "bulkCreateBookInstances",
        "bulkUpdateBookInstanceStatuses",
        "getBookStatistics",
        "getTopPopularBooks",
    ),
)

RESERVATIONS = Category(
    id="reservations",
    display_name="Резервирования",
    icon="📅",
    description="Управление бронированием и выдачей книг",
    keywords=(
        "резерв", "бронь", "бронирование", "резервирование", "заказ", "запрос",
        "забронировать", "зарезервировать", "заказать книгу", "взять книгу",
        "выдать книгу", "вернуть книгу", "продлить", "продление",
        "одобрить", "отклонить", "отменить", "статус", "срок",
        "просрочка", "штраф", "история выдач", "активные брони",
        "даты", "период", "массовое обновление", "просроченные",
        "статистика резервирований", "отчет по резервированиям", "график резервирований",
    ),
    priority=CategoryPriority.CRITICAL,
    tool_names=(
        "getAllReservations",
        "getReservationById",
        "searchReservations",
        "createReservation",
        "updateReservation",
        "deleteReservation",
        "getReservationDates",
        "getReservationDatesByBookId",
        "getReservationsByUserId",
        "bulkUpdateReservations",
        "getOverdueReservations",
        "getReservationStatistics",
    ),
)

ROLES = Category(
    id="roles",
    display_name="Роли и права",
    icon="👥",
    description="Управление ролями пользователей",
    keywords=(
        "роль", "права", "доступ", "разрешения", "администратор", "библиотекарь",
        "назначить роль", "изменить роль", "права доступа", "полномочия",
        "группа", "статус пользователя", "уровень доступа", "удалить роль",
        "массовое назначение", "обновление ролей",
    ),
    priority=CategoryPriority.MEDIUM,
    tool_names=(
        "getAllRoles",
        "assignRoleToUser",
        "assignRoleToMultipleUsers",
        "updateUserRole",
        "removeRoleFromUser",
        "removeRoleFromMultipleUsers",
    ),
)

# Statistics tools are deliberately shared with their domain categories.
REPORTS = Category(
    id="reports",
    display_name="Отчеты и аналитика",
    icon="📊",
    description="Создание отчетов и графиков",
    keywords=(
        "отчет", "статистика", "график", "диаграмма", "аналитика", "данные",
        "построить график", "создать отчет", "показать статистику",
        "анализ", "метрики", "KPI", "дашборд", "визуализация",
        "тренды", "динамика", "сводка", "сводный отчет", "популярные",
        "пользователи", "книги", "резервирования", "период", "группировка",
        "html отчет", "сгенерировать отчет",
    ),
    priority=CategoryPriority.HIGH,
    tool_names=(
        "getUserStatistics",
        "getReservationStatistics",
        "getBookStatistics",
        "getTopPopularBooks",
        "getAllUsers",
        "getAllBooks",
        "getAllReservations",
        "searchUsers",
        "searchBooks",
        "getUserReservations",
        "getBookAvailability",
        "getOverdueReservations",
    ),
)

NOTIFICATIONS = Category(
    id="notifications",
    display_name="Уведомления",
    icon="🔔",
    description="Отправка уведомлений пользователям",
    keywords=(
        "уведомление", "уведомления", "push", "email", "сообщение",
        "отправить", "оповестить", "информировать", "алерт", "предупреждение",
        "шаблон", "кастомное", "массовая рассылка", "тип уведомления",
    ),
    priority=CategoryPriority.LOW,
    tool_names=(
        "sendCustomPushNotification",
        "sendCustomSingleEmail",
        "sendCustomEmailWithTemplate",
    ),
)

HISTORY = Category(
    id="history",
    display_name="История диалогов",
    icon="📝",
    description="Работа с историей диалогов ИИ-ассистента",
    keywords=(
        "история", "диалог", "чат", "сообщения", "поиск в истории",
        "конверсация", "разговор", "логи", "архив", "прошлые запросы",
    ),
    priority=CategoryPriority.FALLBACK,
    tool_names=(
        "getAllDialogHistory",
        "getDialogHistoryByConversationId",
        "searchDialogHistory",
    ),
)

NAVIGATION = Category(
    id="navigation",
    display_name="Навигация",
    icon="🧭",
    description="Переходы между страницами",
    keywords=(
        "перейти", "открыть страницу", "показать страницу", "навигация",
        "страница", "раздел", "меню", "переход", "ссылка", "URL",
        "главная", "каталог", "профиль", "настройки", "админка",
    ),
    priority=CategoryPriority.FALLBACK,
    tool_names=(
        "navigateToPage",
    ),
)

SYSTEM = Category(
    id="system",
    display_name="Системные",
    icon="⚙️",
    description="Управление работой ассистента",
    keywords=(
        "стоп", "остановить", "отменить", "прервать", "отмена",
        "агент", "ассистент", "система", "сброс", "перезапуск",
        "контекст", "системный",
    ),
    priority=CategoryPriority.CRITICAL,
    tool_names=(
        "systemContext",
        "stopAgent",
        "cancelCurrentAction",
    ),
)

LIBRARY_CATEGORIES = (
    USERS,
    BOOKS,
    RESERVATIONS,
    ROLES,
    REPORTS,
    NOTIFICATIONS,
    HISTORY,
    NAVIGATION,
    SYSTEM,
)
