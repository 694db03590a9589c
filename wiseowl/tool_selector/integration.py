"""
Integration layer for the chat assistant.

Turns one outbound chat message into the tool list attached to the
completion request, in automatic or manual category mode.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .catalog import DEFAULT_CATALOG
from .models import SelectionConfig, ToolDescriptor
from .selector import ToolSelector
from ..config import selection_config_from_env, settings
from ..llm import CompletionClient, build_messages, get_completion_client
from ..utils import log, truncate_text

AUTO_MODE = "auto"
MANUAL_MODE = "manual"


def build_tools_payload(tools: Iterable[ToolDescriptor]) -> List[Dict[str, Any]]:
    """Render descriptors in the completion API's function-tool format."""
    return [tool.to_completion_tool() for tool in tools]


def prepare_request_tools(
    message: str,
    all_tools: Sequence[ToolDescriptor],
    mode: str = AUTO_MODE,
    manual_categories: Optional[Iterable[str]] = None,
    config: Optional[SelectionConfig] = None,
    expert_mode: bool = False,
    selector: Optional[ToolSelector] = None,
) -> List[ToolDescriptor]:
    """
    Pick the tools to send with ``message``.

    Args:
        message: The user's chat message
        all_tools: Full tool manifest
        mode: "auto" to detect categories from the message, "manual" to use
            ``manual_categories`` as chosen in the settings dialog
        manual_categories: Category ids for manual mode
        config: Per-call policy override
        expert_mode: Log the selection summary
        selector: ToolSelector to use (the shared default if None)

    Returns:
        Selected ToolDescriptor list
    """
    if mode not in (AUTO_MODE, MANUAL_MODE):
        raise ValueError(f"Unknown tool selection mode: {mode!r}")

    if selector is None:
        selector = get_default_selector()
    config = config or selector.config

    if mode == MANUAL_MODE:
        selected = selector.filter(all_tools, manual_categories or (), (), config)
        log.debug(f"[SELECTOR] Manual mode: {len(selected)}/{len(all_tools)} tools")
        return selected

    outcome = selector.select(message, all_tools, config)
    if expert_mode:
        log.info(f"[SELECTOR] {truncate_text(message)!r}: {selector.summarize(outcome, all_tools)}")
    return outcome.selected_tools


def audit_catalog(all_tools: Sequence[ToolDescriptor], selector: Optional[ToolSelector] = None) -> Dict[str, List[str]]:
    """
    Report drift between the catalog and a live manifest.

    Drift is tolerated by selection, this only makes it visible.
    """
    catalog = selector.catalog if selector is not None else DEFAULT_CATALOG
    unknown = catalog.unknown_tool_names(all_tools)
    uncategorized = catalog.uncategorized_tools(all_tools)

    if unknown:
        log.warning(f"[SELECTOR] Catalog tools missing from manifest: {', '.join(unknown)}")
    if uncategorized:
        log.warning(f"[SELECTOR] Manifest tools without a category: {', '.join(uncategorized)}")

    return {'unknown': unknown, 'uncategorized': uncategorized}


def send_chat_with_tools(
    message: str,
    history: List[Dict[str, Any]],
    all_tools: Sequence[ToolDescriptor],
    system_prompt: Optional[str] = None,
    mode: str = AUTO_MODE,
    manual_categories: Optional[Iterable[str]] = None,
    expert_mode: bool = False,
    client: Optional[CompletionClient] = None,
    selector: Optional[ToolSelector] = None,
) -> Dict[str, Any]:
    """
    Send one chat turn with a narrowed tool list.

    Returns the completion API response, or an {"error": ...} dict.
    """
    selected = prepare_request_tools(
        message,
        all_tools,
        mode=mode,
        manual_categories=manual_categories,
        expert_mode=expert_mode,
        selector=selector,
    )
    messages = build_messages(message, history, system_prompt)
    client = client or get_completion_client()
    return client.chat(messages, tools=build_tools_payload(selected))


# Singleton instance for convenience
_default_selector = None


def get_default_selector() -> ToolSelector:
    """
    Get the shared selector configured from the environment.

    Returns:
        Singleton ToolSelector with analysis caching per settings
    """
    global _default_selector
    if _default_selector is None:
        _default_selector = ToolSelector(
            config=selection_config_from_env(),
            cache_ttl=settings.ANALYSIS_CACHE_TTL or None,
        )
    return _default_selector
