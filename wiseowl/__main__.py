#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tool Selector Diagnostics
=========================

Show what the selector does with a query against the tool manifest.

Usage:
    python -m wiseowl "покажи все книги"
    python -m wiseowl interactive
    python -m wiseowl audit
"""

import io
import sys

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

from .config import settings
from .tool_selector import (
    ManifestError,
    ToolSelector,
    audit_catalog,
    get_default_selector,
    load_tool_manifest,
    suggest_commands,
)


def show_query(selector: ToolSelector, query: str, all_tools):
    """Print analysis and selection for a single query."""
    print(f"\n{'='*70}")
    print(f"Query: '{query}'")
    print(f"{'='*70}")

    analysis = selector.analyze(query)
    if analysis.confidence_by_category:
        print("Confidence:")
        for category_id, confidence in sorted(
            analysis.confidence_by_category.items(), key=lambda item: -item[1]
        ):
            marker = "+" if category_id in analysis.detected_category_ids else " "
            print(f"  [{marker}] {category_id}: {confidence:.3f}")
    else:
        print("[-] No category matched")

    if analysis.detected_tool_names:
        print(f"Explicit tools: {', '.join(analysis.detected_tool_names)}")
    if analysis.suggested_category_ids:
        print(f"Suggested: {', '.join(analysis.suggested_category_ids)}")

    outcome = selector.select(query, all_tools)
    print(f"\nSelected ({len(outcome.selected_tools)}):")
    for tool in outcome.selected_tools:
        print(f"  - {tool.name}")

    print(f"\n{selector.summarize(outcome, all_tools)}")

    completions = suggest_commands(query)
    if completions:
        print(f"\nCommands: {' | '.join(completions)}")

    return outcome


def interactive_mode(selector: ToolSelector, all_tools):
    """Read queries from stdin until interrupted."""
    print("\nInteractive mode. Empty line or Ctrl+C to exit.")
    while True:
        try:
            query = input("\n> ").strip()
            if not query:
                print("Goodbye!")
                break
            show_query(selector, query, all_tools)
        except (KeyboardInterrupt, EOFError):
            print("\n\nGoodbye!")
            break


def main(argv=None):
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    try:
        all_tools = load_tool_manifest(settings.MANIFEST_PATH)
    except ManifestError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    selector = get_default_selector()

    if not args or args[0] == 'interactive':
        interactive_mode(selector, all_tools)
    elif args[0] == 'audit':
        drift = audit_catalog(all_tools, selector)
        print(f"Unknown catalog tools: {len(drift['unknown'])}")
        print(f"Uncategorized manifest tools: {len(drift['uncategorized'])}")
    else:
        show_query(selector, ' '.join(args), all_tools)

    return 0


if __name__ == "__main__":
    sys.exit(main())
