"""Keyboard handling for the question box."""

from pydantic import BaseModel

SUBMIT_KEY = "Enter"

# Runs in the browser: only an unmodified Enter loses its default newline,
# every Enter press is forwarded so the server side makes the final call.
ENTER_KEY_JS_HANDLER = """(e) => {
    if (e.key !== 'Enter') return;
    const modified = e.shiftKey || e.ctrlKey || e.altKey || e.metaKey;
    if (!modified) e.preventDefault();
    emit({key: e.key, shift: e.shiftKey, ctrl: e.ctrlKey, alt: e.altKey, meta: e.metaKey});
}"""


class KeyPress(BaseModel):
    """A key press in the question box.

    Attributes:
        key: DOM key name, e.g. "Enter".
        shift: Shift held.
        ctrl: Control held.
        alt: Alt/Option held.
        meta: Meta/Command held.
    """

    key: str
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def has_modifier(self) -> bool:
        return self.shift or self.ctrl or self.alt or self.meta


def is_submit_key(press: KeyPress) -> bool:
    """Enter without modifiers submits; modified Enter types a newline."""
    return press.key == SUBMIT_KEY and not press.has_modifier
