"""Known Qt style sheet properties, pseudo-states and sub-controls.

The tables follow the Qt Style Sheets Reference. They are read-only: the
public mappings are ``MappingProxyType`` views and the sets are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ValueShape(Enum):
    """The kind of value a property accepts."""

    COLOR = "color"
    BRUSH = "brush"
    COLORS = "colors"
    LENGTH = "length"
    BOX = "box"
    BORDER = "border"
    KEYWORD = "keyword"
    FONT = "font"
    FONT_FAMILY = "font-family"
    URL = "url"
    NUMBER = "number"
    ANY = "any"


@dataclass(frozen=True)
class PropertySpec:
    """Accepted value shape of one property.

    For KEYWORD shapes, ``keywords`` lists the accepted words and
    ``max_items`` how many of them may appear in one value.
    """

    shape: ValueShape
    keywords: frozenset[str] = frozenset()
    max_items: int = 1


DYNAMIC_PROPERTY_PREFIX = "qproperty-"

# ---------------------------------------------------------------------------
# Keyword sets
# ---------------------------------------------------------------------------

ALIGNMENT = frozenset({"top", "bottom", "left", "right", "center"})
ATTACHMENT = frozenset({"scroll", "fixed"})
BOOLEAN = frozenset({"true", "false", "0", "1"})
BORDER_STYLES = frozenset({
    "dashed", "dot-dash", "dot-dot-dash", "dotted", "double", "groove",
    "inset", "outset", "ridge", "solid", "none",
})
FONT_FLAGS = frozenset({
    "normal", "italic", "oblique", "bold", "bolder", "lighter",
    "small-caps",
})
FONT_STYLES = frozenset({"normal", "italic", "oblique"})
FONT_WEIGHTS = frozenset({
    "normal", "bold", "bolder", "lighter",
    "100", "200", "300", "400", "500", "600", "700", "800", "900",
})
ORIGIN = frozenset({"margin", "border", "padding", "content"})
POSITION = frozenset({"relative", "absolute"})
REPEAT = frozenset({"repeat-x", "repeat-y", "repeat", "no-repeat"})
TEXT_DECORATION = frozenset({"none", "underline", "overline", "line-through"})

# SVG color keywords plus the Qt-specific 'transparent'.
NAMED_COLORS = frozenset({
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "grey", "green", "greenyellow", "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki", "lavender", "lavenderblush", "lawngreen",
    "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey",
    "lightpink", "lightsalmon", "lightseagreen", "lightskyblue",
    "lightslategray", "lightslategrey", "lightsteelblue", "lightyellow",
    "lime", "limegreen", "linen", "magenta", "maroon", "mediumaquamarine",
    "mediumblue", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumspringgreen", "mediumturquoise",
    "mediumvioletred", "midnightblue", "mintcream", "mistyrose", "moccasin",
    "navajowhite", "navy", "oldlace", "olive", "olivedrab", "orange",
    "orangered", "orchid", "palegoldenrod", "palegreen", "paleturquoise",
    "palevioletred", "papayawhip", "peachpuff", "peru", "pink", "plum",
    "powderblue", "purple", "red", "rosybrown", "royalblue", "saddlebrown",
    "salmon", "sandybrown", "seagreen", "seashell", "sienna", "silver",
    "skyblue", "slateblue", "slategray", "slategrey", "snow", "springgreen",
    "steelblue", "tan", "teal", "thistle", "tomato", "transparent",
    "turquoise", "violet", "wheat", "white", "whitesmoke", "yellow",
    "yellowgreen",
})

PALETTE_ROLES = frozenset({
    "alternate-base", "base", "bright-text", "button", "button-text", "dark",
    "highlight", "highlighted-text", "light", "link", "link-visited", "mid",
    "midlight", "placeholder-text", "shadow", "text", "tool-tip-base",
    "tool-tip-text", "window", "window-text", "accent",
})

# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

_COLOR = PropertySpec(ValueShape.COLOR)
_BRUSH = PropertySpec(ValueShape.BRUSH)
_LENGTH = PropertySpec(ValueShape.LENGTH)
_BOX = PropertySpec(ValueShape.BOX)
_BORDER = PropertySpec(ValueShape.BORDER)
_URL = PropertySpec(ValueShape.URL)
_NUMBER = PropertySpec(ValueShape.NUMBER)
_ANY = PropertySpec(ValueShape.ANY)
_FLAG = PropertySpec(ValueShape.KEYWORD, BOOLEAN)
_BORDER_STYLE = PropertySpec(ValueShape.KEYWORD, BORDER_STYLES)
_ORIGIN = PropertySpec(ValueShape.KEYWORD, ORIGIN)


def _sides(pattern: str, spec: PropertySpec) -> dict[str, PropertySpec]:
    return {pattern.format(side): spec for side in ("top", "right", "bottom", "left")}


def _corners(pattern: str, spec: PropertySpec) -> dict[str, PropertySpec]:
    return {
        pattern.format(corner): spec
        for corner in ("top-left", "top-right", "bottom-left", "bottom-right")
    }


def _icons(pattern: str, names: tuple[str, ...]) -> dict[str, PropertySpec]:
    return {pattern.format(name): _URL for name in names}


DIALOG_ICONS = (
    "apply", "cancel", "close", "discard", "help", "no", "ok", "open",
    "reset", "save", "yes",
)
TITLEBAR_ICONS = (
    "close", "contexthelp", "maximize", "menu", "minimize", "normal",
    "shade", "unshade",
)

_PROPERTIES: dict[str, PropertySpec] = {
    "alternate-background-color": _BRUSH,
    "background": _ANY,
    "background-color": _BRUSH,
    "background-image": _URL,
    "background-repeat": PropertySpec(ValueShape.KEYWORD, REPEAT),
    "background-position": PropertySpec(ValueShape.KEYWORD, ALIGNMENT, max_items=2),
    "background-attachment": PropertySpec(ValueShape.KEYWORD, ATTACHMENT),
    "background-clip": _ORIGIN,
    "background-origin": _ORIGIN,
    "border": _BORDER,
    **_sides("border-{}", _BORDER),
    "border-color": PropertySpec(ValueShape.COLORS),
    **_sides("border-{}-color", _BRUSH),
    "border-image": _ANY,
    "border-radius": _BOX,
    **_corners("border-{}-radius", _BOX),
    "border-style": PropertySpec(ValueShape.KEYWORD, BORDER_STYLES, max_items=4),
    **_sides("border-{}-style", _BORDER_STYLE),
    "border-width": _BOX,
    **_sides("border-{}-width", _LENGTH),
    "bottom": _LENGTH,
    "button-layout": _NUMBER,
    "color": _BRUSH,
    "dialogbuttonbox-buttons-have-icons": _FLAG,
    "font": PropertySpec(ValueShape.FONT),
    "font-family": PropertySpec(ValueShape.FONT_FAMILY),
    "font-size": _LENGTH,
    "font-style": PropertySpec(ValueShape.KEYWORD, FONT_STYLES),
    "font-weight": PropertySpec(ValueShape.KEYWORD, FONT_WEIGHTS),
    "gridline-color": _COLOR,
    "height": _LENGTH,
    "icon": _ANY,
    "icon-size": PropertySpec(ValueShape.BOX),
    "image": _URL,
    "image-position": PropertySpec(ValueShape.KEYWORD, ALIGNMENT, max_items=2),
    "left": _LENGTH,
    "lineedit-password-character": _NUMBER,
    "lineedit-password-mask-delay": _NUMBER,
    "margin": _BOX,
    **_sides("margin-{}", _LENGTH),
    "max-height": _LENGTH,
    "max-width": _LENGTH,
    "messagebox-text-interaction-flags": _NUMBER,
    "min-height": _LENGTH,
    "min-width": _LENGTH,
    "opacity": _NUMBER,
    "outline": _BORDER,
    "outline-color": _COLOR,
    "outline-offset": _LENGTH,
    "outline-style": _BORDER_STYLE,
    "outline-radius": _BOX,
    **_corners("outline-{}-radius", _BOX),
    "padding": _BOX,
    **_sides("padding-{}", _LENGTH),
    "paint-alternating-row-colors-for-empty-area": _FLAG,
    "placeholder-text-color": _BRUSH,
    "position": PropertySpec(ValueShape.KEYWORD, POSITION),
    "right": _LENGTH,
    "selection-background-color": _BRUSH,
    "selection-color": _BRUSH,
    "show-decoration-selected": _FLAG,
    "spacing": _LENGTH,
    "subcontrol-origin": _ORIGIN,
    "subcontrol-position": PropertySpec(ValueShape.KEYWORD, ALIGNMENT, max_items=2),
    "text-align": PropertySpec(ValueShape.KEYWORD, ALIGNMENT, max_items=2),
    "text-decoration": PropertySpec(ValueShape.KEYWORD, TEXT_DECORATION),
    "titlebar-show-tooltips-on-buttons": _FLAG,
    "top": _LENGTH,
    "widget-animation-duration": _NUMBER,
    "width": _LENGTH,
    "-qt-background-role": PropertySpec(ValueShape.KEYWORD, PALETTE_ROLES),
    "-qt-style-features": _ANY,
    # style hints
    "activate-on-singleclick": _FLAG,
    "combobox-list-mousetracking": _FLAG,
    "combobox-popup": _FLAG,
    "menu-scrollable": _FLAG,
    "menubar-altkey-navigation": _FLAG,
    "scrollview-frame-around-contents": _FLAG,
    "spinbox-click-autorepeat-rate": _NUMBER,
    "tabbar-elide-mode": _NUMBER,
    "tabbar-prefer-no-arrows": _FLAG,
    "toolbutton-popup-delay": _NUMBER,
    **_icons("dialog-{}-icon", DIALOG_ICONS),
    **_icons("dockwidget-{}-icon", ("close", "float")),
    **_icons("messagebox-{}-icon", ("critical", "information", "question", "warning")),
    **_icons("titlebar-{}-icon", TITLEBAR_ICONS),
    "lineedit-clear-button-icon": _URL,
}

PROPERTIES: MappingProxyType[str, PropertySpec] = MappingProxyType(_PROPERTIES)

# ---------------------------------------------------------------------------
# Selector qualifiers
# ---------------------------------------------------------------------------

PSEUDO_STATES = frozenset({
    "active", "adjoins-item", "alternate", "bottom", "checked", "closable",
    "closed", "default", "disabled", "editable", "edit-focus", "enabled",
    "exclusive", "first", "flat", "floatable", "focus", "has-children",
    "has-siblings", "horizontal", "hover", "indeterminate", "last", "left",
    "maximized", "middle", "minimized", "movable", "no-frame",
    "non-exclusive", "off", "on", "only-one", "open", "next-selected",
    "pressed", "previous-selected", "read-only", "right", "selected", "top",
    "unchecked", "vertical", "window",
})

_ARROWS = frozenset({"up-arrow", "down-arrow", "left-arrow", "right-arrow"})
_SPIN = frozenset({"up-button", "down-button", "up-arrow", "down-arrow"})
_CHECKABLE = frozenset({"indicator"})

_SUB_CONTROLS: dict[str, frozenset[str]] = {
    "QAbstractScrollArea": frozenset({"corner"}),
    "QCheckBox": _CHECKABLE,
    "QColumnView": frozenset({"item"}),
    "QComboBox": frozenset({"drop-down", "down-arrow"}),
    "QDateEdit": _SPIN,
    "QDateTimeEdit": _SPIN,
    "QDockWidget": frozenset({"title", "close-button", "float-button"}),
    "QDoubleSpinBox": _SPIN,
    "QGroupBox": frozenset({"title", "indicator"}),
    "QHeaderView": frozenset({"section", "up-arrow", "down-arrow"}),
    "QListView": frozenset({"item", "indicator"}),
    "QListWidget": frozenset({"item", "indicator"}),
    "QMenu": frozenset({
        "item", "indicator", "separator", "right-arrow", "scroller", "tearoff",
        "icon",
    }),
    "QMenuBar": frozenset({"item"}),
    "QProgressBar": frozenset({"chunk"}),
    "QPushButton": frozenset({"menu-indicator"}),
    "QRadioButton": _CHECKABLE,
    "QScrollBar": frozenset({
        "add-line", "add-page", "sub-line", "sub-page", "handle", "groove",
    }) | _ARROWS,
    "QSlider": frozenset({"groove", "handle", "add-page", "sub-page"}),
    "QSpinBox": _SPIN,
    "QSplitter": frozenset({"handle"}),
    "QStatusBar": frozenset({"item"}),
    "QTabBar": frozenset({"tab", "tear", "scroller", "close-button"}),
    "QTabWidget": frozenset({
        "pane", "tab-bar", "left-corner", "right-corner",
    }),
    "QTableView": frozenset({"item", "indicator"}),
    "QTableWidget": frozenset({"item", "indicator"}),
    "QTimeEdit": _SPIN,
    "QToolBar": frozenset({"handle", "separator"}),
    "QToolBox": frozenset({"tab"}),
    "QToolButton": frozenset({"menu-arrow", "menu-button", "menu-indicator"}),
    "QTreeView": frozenset({"branch", "item", "indicator"}),
    "QTreeWidget": frozenset({"branch", "item", "indicator"}),
}

SUB_CONTROLS: MappingProxyType[str, frozenset[str]] = MappingProxyType(_SUB_CONTROLS)

# Used when the selector has no type name or a type the table does not know
# (custom widget classes).
ALL_SUB_CONTROLS: frozenset[str] = frozenset().union(*_SUB_CONTROLS.values()) | frozenset({
    "text", "icon", "close-button", "right-corner", "left-corner",
})


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def lookup_property(name: str) -> PropertySpec | None:
    """The spec for property *name*, or ``None`` if it is not known."""
    key = name.lower()
    if key.startswith(DYNAMIC_PROPERTY_PREFIX) and len(key) > len(DYNAMIC_PROPERTY_PREFIX):
        return PropertySpec(ValueShape.ANY)
    return PROPERTIES.get(key)


def known_pseudo_states(type_name: str | None) -> frozenset[str]:
    """Pseudo-states accepted on selectors of *type_name*.

    Qt pseudo-states are not widget specific, so the global set applies to
    every type.
    """
    return PSEUDO_STATES


def known_sub_controls(type_name: str | None) -> frozenset[str]:
    """Sub-controls accepted on selectors of *type_name*."""
    if type_name is None or type_name == "*":
        return ALL_SUB_CONTROLS
    return SUB_CONTROLS.get(type_name, ALL_SUB_CONTROLS)
