"""Per-language abbreviations whose trailing period does not end a sentence."""

from __future__ import annotations

from typing import Dict, FrozenSet

ABBREVIATIONS: Dict[str, FrozenSet[str]] = {
    "english": frozenset(
        {"mr.", "mrs.", "ms.", "dr.", "prof.", "sr.", "jr.", "st.", "ph.d.", "etc.", "i.e.", "e.g.", "vs."}
    ),
    "german": frozenset({"dr.", "prof.", "hr.", "fr.", "bzw.", "z.b.", "u.a.", "usw.", "etc.", "ca.", "nr.", "s."}),
    "spanish": frozenset({"sr.", "sra.", "srta.", "dr.", "dra.", "ud.", "uds.", "etc.", "p.ej.", "pág."}),
    "italian": frozenset({"sig.", "sigg.", "dr.", "dott.", "prof.", "ecc.", "ing.", "avv."}),
    "french": frozenset({"m.", "mme.", "mlle.", "dr.", "prof.", "etc.", "p.ex.", "cf."}),
    "dutch": frozenset({"mr.", "mw.", "dhr.", "dr.", "prof.", "etc.", "bijv.", "enz.", "o.a."}),
}


def abbreviations_for(language: str) -> FrozenSet[str]:
    """Abbreviations for ``language``, english for anything unsupported."""
    return ABBREVIATIONS.get(language, ABBREVIATIONS["english"])
