from arena_app.core.text_renderer import QuestionTextRenderer


def test_renders_markdown_emphasis():
    html = QuestionTextRenderer().render_fragment("What is **2 + 2**?")
    assert "<strong>2 + 2</strong>" in html


def test_raw_html_is_escaped():
    html = QuestionTextRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_empty_text_has_placeholder():
    assert "No content provided." in QuestionTextRenderer().render_fragment("   ")


def test_question_wrapper_sets_font_size():
    html = QuestionTextRenderer().render_question("Hi", font_size=18)
    assert html.startswith('<div style="font-size: 18pt;">')
