"""Tests for contextual Arabic shaping."""

import pytest
from arabic_pdf_exporter.shaping.forms import GLYPH_FORMS
from arabic_pdf_exporter.shaping.sanitizer import sanitize
from arabic_pdf_exporter.shaping.shaper import (
    JoinClass,
    ShapedToken,
    join_class,
    shape,
    shape_tokens,
)

BEH = "ب"


class TestJoinClass:
    def test_classes(self):
        assert join_class(BEH) is JoinClass.DUAL
        assert join_class("ا") is JoinClass.RIGHT
        assert join_class("ء") is JoinClass.OTHER
        assert join_class("A") is JoinClass.OTHER
        assert join_class(" ") is JoinClass.OTHER
        assert join_class(None) is JoinClass.OTHER


class TestLigatures:
    def test_lam_alef_isolated(self):
        assert shape("لا") == "ﻻ"

    def test_lam_alef_after_joining_letter(self):
        # beh initial + lam-alef final
        assert shape("بلا") == "ﺑﻼ"

    @pytest.mark.parametrize("alef,isolated,final", [
        ("ا", "ﻻ", "ﻼ"),
        ("آ", "ﻵ", "ﻶ"),
        ("أ", "ﻷ", "ﻸ"),
        ("إ", "ﻹ", "ﻺ"),
    ])
    def test_all_alef_variants(self, alef, isolated, final):
        assert shape("ل" + alef) == isolated
        assert shape(BEH + "ل" + alef) == "ﺑ" + final

    def test_lam_alef_after_non_joining_letter(self):
        # dal does not join forward, so the ligature stays isolated
        assert shape("دلا") == "ﺩﻻ"

    def test_ligature_consumes_both_letters(self):
        # seen initial, lam-alef final, meem isolated (alef never joins forward)
        assert shape("سلام") == "ﺳﻼﻡ"

    def test_lam_alone_at_end(self):
        assert shape("بل") == "ﺑﻞ"

    def test_zero_width_joiner_blocks_ligature_until_sanitized(self):
        raw = "ل‍ا"
        assert "ﻻ" not in shape(raw)
        assert shape(sanitize(raw)) == "ﻻ"


class TestContextualForms:
    def test_dual_joining_word(self):
        # kaf initial, teh medial, beh final
        assert shape("كتب") == "ﻛﺘﺐ"

    def test_right_joining_letters_break_the_word(self):
        assert shape("دار") == "ﺩﺍﺭ"

    def test_alef_takes_final_after_dual_letter(self):
        assert shape("باب") == "ﺑﺎﺏ"

    def test_single_letter_is_isolated(self):
        assert shape(BEH) == "ﺏ"

    def test_space_breaks_joining(self):
        assert shape("ب ب") == "ﺏ ﺏ"

    def test_latin_neighbour_breaks_joining(self):
        assert shape("بA") == "ﺏA"
        assert shape("Aب") == "Aﺏ"

    def test_hamza_breaks_joining(self):
        assert shape("بءب") == "ﺏﺀﺏ"

    def test_teh_marbuta_final(self):
        # meem initial, dal final, reh isolated, seen initial, teh marbuta final
        assert shape("مدرسة") == "ﻣﺪﺭﺳﺔ"

    def test_yeh_with_hamza_is_dual_joining(self):
        assert shape("بئر") == "ﺑﺌﺮ"

    @pytest.mark.parametrize("letter", [
        c for c, forms in GLYPH_FORMS.items() if not forms.joins_next
    ])
    def test_non_forward_joining_never_initial_or_medial(self, letter):
        forms = GLYPH_FORMS[letter]
        for text, index in ((letter + BEH, 0), (BEH + letter + BEH, 1), (BEH + letter, 1)):
            glyph = shape(text)[index]
            assert glyph in (forms.isolated, forms.final)

    @pytest.mark.parametrize("letter", [
        c for c, forms in GLYPH_FORMS.items() if not forms.joins_next and forms.joins_prev
    ])
    def test_non_forward_joining_takes_final_after_dual_letter(self, letter):
        assert shape(BEH + letter + BEH)[1] == GLYPH_FORMS[letter].final

    def test_following_letter_starts_fresh_after_non_joining(self):
        # beh after waw takes isolated form at end of word
        assert shape("وب")[1] == "ﺏ"
        assert shape("وبب")[1] == "ﺑ"


class TestPassThrough:
    @pytest.mark.parametrize("text", [
        "",
        "Hello, World!",
        "12345 67.89",
        "(a) [b] {c}",
        "١٢٣",  # Arabic-Indic digits
    ])
    def test_non_arabic_shapes_to_itself(self, text):
        clean = sanitize(text)
        assert shape(clean) == clean

    def test_already_shaped_text_unchanged(self):
        shaped = shape("بلا كتب")
        assert shape(shaped) == shaped

    def test_no_base_letters_remain(self):
        shaped = shape(sanitize("السلام عليكم ورحمة الله وبركاته"))
        assert not any(c in GLYPH_FORMS for c in shaped)

    def test_length_never_grows(self):
        text = "لا إله إلا الله"
        assert len(shape(text)) <= len(text)


class TestShapeTokens:
    def test_split_on_whitespace(self):
        tokens = shape_tokens("كتاب جديد")
        assert len(tokens) == 2
        assert all(isinstance(t, ShapedToken) for t in tokens)
        assert tokens[0].glyphs == shape("كتاب")

    def test_single_newlines_unwrapped(self):
        assert len(shape_tokens("سطر\nآخر هنا")) == 3

    def test_empty_paragraph(self):
        assert shape_tokens("") == ()

    def test_token_str_and_len(self):
        token = shape_tokens("بلا")[0]
        assert str(token) == "ﺑﻼ"
        assert len(token) == 2
