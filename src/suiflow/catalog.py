"""Component catalog and bundled template locations.

The catalog is the fixed list of installable component names. Every name is
kebab-case and maps to a bundled `<PascalCase>.tsx` template under
`data/components`.
"""

import re
from pathlib import Path

COMPONENTS: tuple[str, ...] = (
    "connect-button",
    "connect-modal",
    "connector",
    "address-display",
    "balance-display",
    "transaction-notifier",
    "nft-card",
    "token-input",
    "nft-gallery",
    "transaction-history",
    "object-display",
)

TEMPLATE_SUFFIX = ".tsx"

_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def to_pascal_case(name: str) -> str:
    """Convert a kebab-case component name to PascalCase.

    Example:
        >>> to_pascal_case("connect-button")
        'ConnectButton'
    """
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))


def to_kebab_case(name: str) -> str:
    """Convert a PascalCase or camelCase identifier to kebab-case.

    A hyphen is inserted between a lowercase letter or digit and the uppercase
    letter that follows it; the result is lowercased.

    Example:
        >>> to_kebab_case("NftGallery")
        'nft-gallery'
    """
    return _CASE_BOUNDARY.sub(r"\1-\2", name).lower()


def template_filename(name: str) -> str:
    return f"{to_pascal_case(name)}{TEMPLATE_SUFFIX}"


def bundled_components_dir() -> Path:
    """Directory holding one template file per catalog component."""
    return Path(__file__).parent / "data" / "components"


def bundled_project_templates_dir() -> Path:
    """Directory mirrored under the `@/` alias (shared utility modules)."""
    return Path(__file__).parent / "data" / "project"
