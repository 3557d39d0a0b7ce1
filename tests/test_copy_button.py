import json

from copy_button import copy_button_html


def test_payload_and_labels_are_embedded():
    html = copy_button_html("Net Salary: 3,393.00 RON", "Copy results", "Copied!")
    assert json.dumps("Net Salary: 3,393.00 RON") in html
    assert '"Copy results"' in html
    assert '"Copied!"' in html


def test_copied_label_only_after_write_resolves():
    html = copy_button_html("x", "Copy", "Copied!")
    click = html.index('addEventListener("click"')
    write = html.index("navigator.clipboard.writeText(payload).then(")
    copied = html.index("status.textContent = \"Copied!\"")
    assert click < write < copied


def test_feedback_window_in_milliseconds():
    assert "}, 2000);" in copy_button_html("x", "Copy", "Copied!", feedback_seconds=2)
    assert "}, 500);" in copy_button_html("x", "Copy", "Copied!", feedback_seconds=0.5)


def test_payload_cannot_close_the_script_tag():
    html = copy_button_html("</script><b>", "Copy", "Copied!")
    assert "</script><b>" not in html
    assert "\\u003c/script>" in html
