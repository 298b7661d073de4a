#!/usr/bin/env python3
"""
Audit the alias table against the trick catalog.

Checks:
  - every alias target names a catalog trick (broken targets fail the run)
  - alias phrases that are redundant (exact catalog names)
  - alias phrases the fuzzy fallback alone would send somewhere else

Default paths: the package data dir (or SHREDNOTES_DATA_DIR).

Usage:
  python tools/audit_aliases.py
  python tools/audit_aliases.py --catalog ./catalog.json --aliases ./aliases.json
"""

from __future__ import annotations
import argparse, os, sys
from typing import Dict, List, Optional

from tqdm import tqdm

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from shrednotes.alias_resolver import resolve_trick_name
from shrednotes.config import ConfigError, load_alias_table, load_catalog
from shrednotes.models import Trick


def audit_aliases(catalog: List[Trick], aliases: Dict[str, str],
                  progress: bool = False) -> Dict[str, list]:
    """
    Returns {'broken': [(phrase, target)], 'redundant': [phrase],
             'fuzzy_conflicts': [(phrase, target, fuzzy_name)]}.
    """
    names = {t.name.lower() for t in catalog}
    report: Dict[str, list] = {"broken": [], "redundant": [], "fuzzy_conflicts": []}

    for phrase, target in tqdm(sorted(aliases.items()), desc="Auditing", disable=not progress):
        if target.lower() not in names:
            report["broken"].append((phrase, target))
            continue
        if phrase in names:
            report["redundant"].append(phrase)
            continue
        # What would the resolver pick without the alias table?
        fuzzy: Optional[Trick] = resolve_trick_name(phrase, catalog, {})
        if fuzzy is not None and fuzzy.name.lower() != target.lower():
            report["fuzzy_conflicts"].append((phrase, target, fuzzy.name))
    return report


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Audit aliases.json against catalog.json")
    ap.add_argument("--catalog", default=None, help="Path to catalog.json")
    ap.add_argument("--aliases", default=None, help="Path to aliases.json")
    args = ap.parse_args(argv)

    try:
        catalog = load_catalog(args.catalog)
        aliases = load_alias_table(args.aliases)
    except ConfigError as e:
        print(f"[audit_aliases] {e}")
        return 2

    report = audit_aliases(catalog, aliases, progress=True)

    for phrase, target in report["broken"]:
        print(f"[audit_aliases] BROKEN  '{phrase}' -> '{target}' (not in catalog)")
    for phrase in report["redundant"]:
        print(f"[audit_aliases] REDUNDANT '{phrase}' is already a catalog name")
    for phrase, target, fuzzy_name in report["fuzzy_conflicts"]:
        print(f"[audit_aliases] NOTE    '{phrase}' -> '{target}' (fuzzy alone: '{fuzzy_name}')")

    print(f"[audit_aliases] {len(aliases)} aliases, {len(catalog)} tricks, "
          f"{len(report['broken'])} broken")
    return 1 if report["broken"] else 0


if __name__ == "__main__":
    sys.exit(main())
