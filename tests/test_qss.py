from floatverse.qss import (
    COMMENT_COLOR,
    KEY_COLOR,
    SELECTOR_COLOR,
    STRING_COLOR,
    UNIT_COLOR,
    VALUE_COLOR,
    Span,
    continuation_indent,
    highlight,
)


def _color_at(spans, index):
    for span in spans:
        if span.start <= index < span.end:
            return span.color
    return None


def test_selector_line():
    text = "QWidget {"
    assert highlight(text) == [Span(0, len(text), SELECTOR_COLOR)]


def test_key_and_value():
    text = "color: red;"
    spans = highlight(text)
    for index in range(text.index(":")):
        assert _color_at(spans, index) == KEY_COLOR
    assert _color_at(spans, text.index(":")) is None
    assert _color_at(spans, text.index("r", 5)) == VALUE_COLOR
    assert _color_at(spans, text.index(";")) is None


def test_comment():
    text = "/* note */"
    assert highlight(text) == [Span(0, len(text), COMMENT_COLOR)]


def test_unit_after_number():
    text = "width: 10px;"
    spans = highlight(text)
    assert _color_at(spans, text.index("p")) == UNIT_COLOR
    assert _color_at(spans, text.index("x")) == UNIT_COLOR
    assert _color_at(spans, text.index("1")) == VALUE_COLOR


def test_string_value():
    text = "font: 'Arial';"
    spans = highlight(text)
    assert _color_at(spans, text.index("A")) == STRING_COLOR
    assert _color_at(spans, text.index("'")) == STRING_COLOR


def test_hex_color_literal():
    text = "color: #ff0000;"
    spans = highlight(text)
    hash_index = text.index("#")
    for index in range(hash_index, text.index(";")):
        assert _color_at(spans, index) == (255, 0, 0, 255)
    assert _color_at(spans, text.index(";")) is None
    assert _color_at(spans, hash_index - 1) == VALUE_COLOR


def test_white_hex_shown_black():
    text = "color: #fff"
    spans = highlight(text)
    assert _color_at(spans, text.index("#")) == (0, 0, 0, 255)


def test_rgba_function():
    text = "background: rgba(0, 128, 0, 1);"
    spans = highlight(text)
    assert _color_at(spans, text.index("rgba")) == (0, 128, 0, 255)


def test_white_rgb_function_shown_black():
    text = "color: rgb(255, 255, 255);"
    spans = highlight(text)
    assert _color_at(spans, text.index("rgb")) == (0, 0, 0, 255)


def test_spans_are_ordered_and_disjoint():
    text = "QPushButton:hover { border: 1px solid #123456; /* x */ }"
    spans = highlight(text)
    assert spans
    previous_end = 0
    for span in spans:
        assert span.length > 0
        assert span.start >= previous_end
        assert span.end <= len(text)
        previous_end = span.end


def test_empty_text_has_no_spans():
    assert highlight("") == []


def test_continuation_indent_follows_previous_line():
    text = "    a: b;\n"
    assert continuation_indent(text, len(text)) == "    "


def test_continuation_indent_multiline():
    text = "QWidget {\n\tcolor: red;\n"
    assert continuation_indent(text, len(text)) == "\t"
    assert continuation_indent("x\n", 2) == ""