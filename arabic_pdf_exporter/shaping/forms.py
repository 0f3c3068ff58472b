"""
Arabic presentation-form tables.

Maps each supported base letter (U+0621..U+064A) to its contextual
presentation forms from the Arabic Presentation Forms-B block, together
with its joining behaviour:

- joins_prev: the letter connects to the letter before it (right side)
- joins_next: the letter connects to the letter after it (left side)

Right-joining letters (alef, dal, reh, waw, teh marbuta, ...) have only
isolated and final forms.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class FormSet:
    """Contextual presentation forms of one Arabic letter."""
    isolated: str
    initial: Optional[str] = None
    medial: Optional[str] = None
    final: Optional[str] = None
    joins_prev: bool = True
    joins_next: bool = True

    def select(self, joined_prev: bool, joined_next: bool) -> str:
        """Pick the form for the given join context, isolated if undefined."""
        if joined_prev and joined_next:
            form = self.medial
        elif joined_prev:
            form = self.final
        elif joined_next:
            form = self.initial
        else:
            form = self.isolated
        return form or self.isolated


def _dual(isolated: str, final: str, initial: str, medial: str) -> FormSet:
    return FormSet(isolated, initial=initial, medial=medial, final=final)


def _right(isolated: str, final: str) -> FormSet:
    return FormSet(isolated, final=final, joins_next=False)


LAM = "\u0644"
ALEF = "\u0627"
ALEF_MADDA = "\u0622"
ALEF_HAMZA_ABOVE = "\u0623"
ALEF_HAMZA_BELOW = "\u0625"

_FORMS = {
    "\u0621": FormSet("\uFE80", joins_prev=False, joins_next=False),  # hamza
    ALEF_MADDA: _right("\uFE81", "\uFE82"),
    ALEF_HAMZA_ABOVE: _right("\uFE83", "\uFE84"),
    "\u0624": _right("\uFE85", "\uFE86"),  # waw with hamza
    ALEF_HAMZA_BELOW: _right("\uFE87", "\uFE88"),
    "\u0626": _dual("\uFE89", "\uFE8A", "\uFE8B", "\uFE8C"),  # yeh with hamza
    ALEF: _right("\uFE8D", "\uFE8E"),
    "\u0628": _dual("\uFE8F", "\uFE90", "\uFE91", "\uFE92"),  # beh
    "\u0629": _right("\uFE93", "\uFE94"),  # teh marbuta
    "\u062A": _dual("\uFE95", "\uFE96", "\uFE97", "\uFE98"),  # teh
    "\u062B": _dual("\uFE99", "\uFE9A", "\uFE9B", "\uFE9C"),  # theh
    "\u062C": _dual("\uFE9D", "\uFE9E", "\uFE9F", "\uFEA0"),  # jeem
    "\u062D": _dual("\uFEA1", "\uFEA2", "\uFEA3", "\uFEA4"),  # hah
    "\u062E": _dual("\uFEA5", "\uFEA6", "\uFEA7", "\uFEA8"),  # khah
    "\u062F": _right("\uFEA9", "\uFEAA"),  # dal
    "\u0630": _right("\uFEAB", "\uFEAC"),  # thal
    "\u0631": _right("\uFEAD", "\uFEAE"),  # reh
    "\u0632": _right("\uFEAF", "\uFEB0"),  # zain
    "\u0633": _dual("\uFEB1", "\uFEB2", "\uFEB3", "\uFEB4"),  # seen
    "\u0634": _dual("\uFEB5", "\uFEB6", "\uFEB7", "\uFEB8"),  # sheen
    "\u0635": _dual("\uFEB9", "\uFEBA", "\uFEBB", "\uFEBC"),  # sad
    "\u0636": _dual("\uFEBD", "\uFEBE", "\uFEBF", "\uFEC0"),  # dad
    "\u0637": _dual("\uFEC1", "\uFEC2", "\uFEC3", "\uFEC4"),  # tah
    "\u0638": _dual("\uFEC5", "\uFEC6", "\uFEC7", "\uFEC8"),  # zah
    "\u0639": _dual("\uFEC9", "\uFECA", "\uFECB", "\uFECC"),  # ain
    "\u063A": _dual("\uFECD", "\uFECE", "\uFECF", "\uFED0"),  # ghain
    "\u0641": _dual("\uFED1", "\uFED2", "\uFED3", "\uFED4"),  # feh
    "\u0642": _dual("\uFED5", "\uFED6", "\uFED7", "\uFED8"),  # qaf
    "\u0643": _dual("\uFED9", "\uFEDA", "\uFEDB", "\uFEDC"),  # kaf
    LAM: _dual("\uFEDD", "\uFEDE", "\uFEDF", "\uFEE0"),
    "\u0645": _dual("\uFEE1", "\uFEE2", "\uFEE3", "\uFEE4"),  # meem
    "\u0646": _dual("\uFEE5", "\uFEE6", "\uFEE7", "\uFEE8"),  # noon
    "\u0647": _dual("\uFEE9", "\uFEEA", "\uFEEB", "\uFEEC"),  # heh
    "\u0648": _right("\uFEED", "\uFEEE"),  # waw
    "\u0649": _right("\uFEEF", "\uFEF0"),  # alef maqsura
    "\u064A": _dual("\uFEF1", "\uFEF2", "\uFEF3", "\uFEF4"),  # yeh
}

# Built once at import; read-only for the life of the process.
GLYPH_FORMS: Mapping[str, FormSet] = MappingProxyType(_FORMS)


@dataclass(frozen=True)
class LigatureForms:
    isolated: str
    final: str


# lam + alef variant -> lam-alef ligature
LAM_ALEF_LIGATURES: Mapping[str, LigatureForms] = MappingProxyType({
    ALEF_MADDA: LigatureForms("\uFEF5", "\uFEF6"),
    ALEF_HAMZA_ABOVE: LigatureForms("\uFEF7", "\uFEF8"),
    ALEF_HAMZA_BELOW: LigatureForms("\uFEF9", "\uFEFA"),
    ALEF: LigatureForms("\uFEFB", "\uFEFC"),
})


def forms_for(char: str) -> Optional[FormSet]:
    """Return the FormSet for a base letter, or None if unsupported."""
    return GLYPH_FORMS.get(char)


def joins_next(char: Optional[str]) -> bool:
    forms = GLYPH_FORMS.get(char) if char else None
    return bool(forms and forms.joins_next)


def joins_prev(char: Optional[str]) -> bool:
    forms = GLYPH_FORMS.get(char) if char else None
    return bool(forms and forms.joins_prev)
