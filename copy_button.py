# -*- coding: utf-8 -*-
"""Clipboard copy button rendered inside a component iframe.

The write happens in the click handler itself, so the browser sees a user
gesture. The "copied" label is only shown once ``writeText`` resolves and
clears itself after the feedback window.
"""
import json

from settings import COPY_FEEDBACK_SECONDS

TEMPLATE = """
<style>
button {{ font: 14px sans-serif; padding: 0.4em 1em; border-radius: 0.5rem;
          border: 1px solid #c7d2fe; background: #eef2ff; color: #4F46E5; cursor: pointer; }}
span {{ font: 14px sans-serif; color: #15803d; margin-left: 0.6em; }}
</style>
<button id="copy-button"></button><span id="copy-status"></span>
<script>
const payload = {payload};
const button = document.getElementById("copy-button");
const status = document.getElementById("copy-status");
let timer = null;
button.textContent = {label};
button.addEventListener("click", () => {{
  navigator.clipboard.writeText(payload).then(() => {{
    status.textContent = {copied};
    clearTimeout(timer);
    timer = setTimeout(() => {{ status.textContent = ""; }}, {feedback_ms});
  }}, (err) => {{
    status.textContent = "";
    console.warn("clipboard write failed", err);
  }});
}});
</script>
"""


def _js_string(text: str) -> str:
    return json.dumps(text).replace("<", "\\u003c")


def copy_button_html(payload: str, label: str, copied_label: str,
                     feedback_seconds: float = COPY_FEEDBACK_SECONDS) -> str:
    return TEMPLATE.format(
        payload=_js_string(payload),
        label=_js_string(label),
        copied=_js_string(copied_label),
        feedback_ms=int(feedback_seconds * 1000),
    )
