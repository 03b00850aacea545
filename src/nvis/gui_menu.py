# nvis/gui_menu.py

from __future__ import annotations

import platform
import tkinter as tk
import tkinter.messagebox as mbox

from .__about__ import APP_NAME, about_text


# Declarative menu spec.
# "shortcut" is a string like "MOD+T" or a list of them (e.g., ["DOWN", "MOD+N"]).
# Valid tokens: MOD, CTRL, CMD, ALT, SHIFT, letters, digits and the named
# keys listed in KEYSYM_MAP.
MENU_SPEC = [
    {
        "menu": "Panels",
        "items": [
            {
                "label": "Next Panel",
                "command": "_focus_next",
                "shortcut": "DOWN",
            },
            {
                "label": "Previous Panel",
                "command": "_focus_previous",
                "shortcut": "UP",
            },
            {
                "type": "separator",
            },
            {
                "label": "Copy Focused Panel",
                "command": "_copy_focused",
                "shortcut": "CTRL+S",
            },
            {
                "label": "Toggle Input Mode",
                "command": "_toggle_mode",
                "shortcut": "CTRL+T",
            },
            {
                "type": "separator",
            },
            {
                "label": "Quit",
                "command": "_quit",
                "shortcut": "CTRL+Q",
            },
        ],
    },
    {
        "menu": "Help",
        "items": [
            {
                "label": "About",
                "command": "_show_about",
            },
            {
                "label": "Shortcuts…",
                "command": "_show_shortcuts",
            },
        ],
    },
]

# token -> (menu label, Tk keysym)
KEYSYM_MAP = {
    "ENTER":  ("Enter",  "Return"),
    "RETURN": ("Return", "Return"),
    "ESC":    ("Esc",    "Escape"),
    "SPACE":  ("Space",  "space"),
    "TAB":    ("Tab",    "Tab"),
    "UP":     ("Up",     "Up"),
    "DOWN":   ("Down",   "Down"),
    "LEFT":   ("Left",   "Left"),
    "RIGHT":  ("Right",  "Right"),
    "PGUP":   ("PgUp",   "Prior"),
    "PGDN":   ("PgDn",   "Next"),
    **{f"F{i}": (f"F{i}", f"F{i}") for i in range(1, 13)},
    "COMMA":  (",", "comma"),
    "PERIOD": (".", "period"),
    "SLASH":  ("/", "slash"),
}

MOD_TOKENS = ("MOD", "CTRL", "CMD", "ALT", "SHIFT")


def _platform_keycfg() -> dict[str, str]:
    """Tk modifier names and user-facing labels for the running platform."""
    if platform.system() == "Darwin":
        return {
            "MOD": "Command",     "MOD_LABEL": "Cmd",
            "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
            "CMD": "Command",     "CMD_LABEL": "Cmd",
            "ALT": "Option",      "ALT_LABEL": "Opt",
            "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
        }
    return {
        "MOD": "Control",     "MOD_LABEL": "Ctrl",
        "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
        "CMD": "Control",     "CMD_LABEL": "Ctrl",
        "ALT": "Alt",         "ALT_LABEL": "Alt",
        "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
    }

def _resolve_shortcut(shortcut: str, keycfg: dict[str, str]) -> tuple[str, str]:
    """
    Convert 'CTRL+SHIFT+S' style shortcuts into:
      - a menu accelerator label (e.g., 'Ctrl+Shift+S')
      - a Tk binding sequence (e.g., '<Control-Shift-s>')
    The last non-modifier token is the key; MOD is dropped when CMD/CTRL is present.
    """
    mods: list[str] = []
    key: str | None = None
    for token in (p.strip().upper() for p in shortcut.split("+")):
        if not token:
            continue
        if token in MOD_TOKENS:
            if token not in mods:
                mods.append(token)
        else:
            key = token

    explicit = "CMD" in mods or "CTRL" in mods
    order = ("CMD", "CTRL", "ALT", "SHIFT") if explicit else ("MOD", "ALT", "SHIFT")

    labels = [keycfg.get(f"{m}_LABEL", m.title()) for m in order if m in mods]
    binds = [keycfg.get(m, m.title()) for m in order if m in mods]

    if key is not None:
        if key in KEYSYM_MAP:
            nice, keysym = KEYSYM_MAP[key]
        elif len(key) == 1:
            nice, keysym = key.upper(), key.lower()
        else:
            nice, keysym = key.title(), key
        labels.append(nice)
        binds.append(keysym)

    label = "+".join(labels)
    bind = "<" + "-".join(binds) + ">" if binds else ""
    return label, bind

def _binding_variants(bind_seq: str) -> set[str]:
    """Both letter cases of a single-letter binding, so Caps Lock does not matter."""
    variants = {bind_seq}
    parts = bind_seq[1:-1].split("-")
    key = parts[-1]
    if len(key) == 1 and key.isalpha():
        for k in (key.lower(), key.upper()):
            variants.add("<" + "-".join(parts[:-1] + [k]) + ">")
    return variants

def build_menubar(root: tk.Tk, app: object, spec: list[dict] = MENU_SPEC) -> tk.Menu:
    """
    Create and attach a menubar to `root` using `spec`, binding shortcuts to methods on `app`.
    Returns the created menubar.
    """
    keycfg = _platform_keycfg()
    menubar = tk.Menu(root)
    root.config(menu=menubar)

    for menu_def in spec:
        m = tk.Menu(menubar, tearoff=False)
        menubar.add_cascade(label=menu_def["menu"], menu=m)

        for item in menu_def.get("items", []):
            if item.get("type") == "separator":
                m.add_separator()
                continue

            command = getattr(app, item["command"], None) or (lambda *a, **k: None)
            def invoke(fn=command):
                fn()

            sc = item.get("shortcut")
            shortcuts = sc if isinstance(sc, (list, tuple)) else ([sc] if sc else [])
            accel = ""
            for idx, s in enumerate(shortcuts):
                label, bind_seq = _resolve_shortcut(s, keycfg)
                if idx == 0:
                    accel = label
                if not bind_seq:
                    continue
                for v in _binding_variants(bind_seq):
                    root.bind_all(v, lambda e, inv=invoke: (inv(), "break")[1])

            m.add_command(label=item["label"], command=invoke, accelerator=accel)

    return menubar

def shortcut_lines(spec: list[dict] = MENU_SPEC, keycfg: dict[str, str] | None = None) -> list[str]:
    """'Label: Shortcut' lines for every menu item that has a shortcut."""
    keycfg = keycfg or _platform_keycfg()
    lines = []
    for menu in spec:
        for item in menu.get("items", []):
            shortcut = item.get("shortcut")
            if item.get("type") == "separator" or not shortcut:
                continue
            shortcuts = shortcut if isinstance(shortcut, (list, tuple)) else [shortcut]
            labels = [_resolve_shortcut(s, keycfg)[0] for s in shortcuts]
            lines.append(f"{item['label']}: {', '.join(labels)}")
    return lines

def show_about_dialog(app, root):
    mbox.showinfo(f"About {APP_NAME}", about_text(), parent=root)

def show_shortcuts_dialog(app, root):
    mbox.showinfo("Keyboard Shortcuts", "\n".join(shortcut_lines()), parent=root)
