APP_ORG = "Scratchdisk"
APP_NAME = "Scriptographer"
DIALOG_TITLE = f"About {APP_NAME}"

AUTHOR = "Jürg Lehni"
FIRST_YEAR = 2001

SITE_URL = "http://www.scriptographer.com"
AUTHOR_URL = "http://www.scratchdisk.com"

# action-id -> URL opened when the matching text line is clicked
LINKS = {
    "site": SITE_URL,
    "author": AUTHOR_URL,
}

LOGO_IMAGE = "logo.png"

# component ids
LOGO = "logo"
TEXT = "text"
OK_BUTTON = "ok"

# columns, rows
ABOUT_LAYOUT = ("preferred fill preferred", "preferred fill preferred")
ABOUT_CONTENT = {
    "0, 0, L, T": LOGO,
    "1, 0, 2, 1": TEXT,
    "2, 2": OK_BUTTON,
}
# per-component margin, (top, right, bottom, left)
ABOUT_MARGINS = {
    LOGO: (-4, 4, -4, -4),
}

DEFAULT_MARGIN = 8
TEXT_BOTTOM_MARGIN = 8
OK_LABEL = "  OK  "
