"""Static import scanning for component templates.

Templates are scanned with a text pattern rather than a TypeScript parser.
Everything that depends on the pattern lives in this module so the rest of
the installer only sees the classified result.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from suiflow.catalog import COMPONENTS, to_kebab_case

logger = logging.getLogger(__name__)

# Matches `from '<specifier>'` and `from "<specifier>"`, value and type-only imports alike
IMPORT_FROM_PATTERN = re.compile(r"""from\s+['"]([^'"]+)['"]""")

LOCAL_ALIAS_PREFIX = "@/"
FRAMEWORK_PACKAGE = "react"

_SCRIPT_EXTENSION = re.compile(r"\.[jt]sx?$")


@dataclass(frozen=True)
class ClassifiedImports:
    """Import specifiers of one source file, split by how they get installed.

    Attributes:
        external_packages: npm package names (scoped names keep two segments)
        internal_components: catalog component names referenced relatively
        local_module_refs: raw `@/` specifiers for project-local modules
    """

    external_packages: tuple[str, ...]
    internal_components: tuple[str, ...]
    local_module_refs: tuple[str, ...]


def scan_import_specifiers(source_text: str) -> list[str]:
    """Return every import specifier in source order."""
    return [match.group(1) for match in IMPORT_FROM_PATTERN.finditer(source_text)]


def scan_local_module_refs(source_text: str) -> list[str]:
    """Return the de-duplicated `@/` specifiers in source order."""
    return _unique(
        spec for spec in scan_import_specifiers(source_text) if spec.startswith(LOCAL_ALIAS_PREFIX)
    )


def package_name_for(specifier: str) -> str:
    """Reduce a bare specifier to the package that provides it.

    Example:
        >>> package_name_for("@mysten/dapp-kit/dist/index.css")
        '@mysten/dapp-kit'
        >>> package_name_for("date-fns/locale")
        'date-fns'
    """
    segments = specifier.split("/")
    if specifier.startswith("@"):
        return "/".join(segments[:2])
    return segments[0]


def component_name_for_relative(specifier: str) -> str:
    """Derive the kebab-case name a relative import points at.

    `./NftCard` gives `nft-card`; for `../nft-card/index` or `../nft-card/`
    the parent segment is used instead. Returns an empty string when no
    segment is available.
    """
    segments = specifier.split("/")
    name = segments[-1]
    if name in ("", "index"):
        name = segments[-2] if len(segments) > 1 else ""
    name = _SCRIPT_EXTENSION.sub("", name)
    return to_kebab_case(name)


def classify_imports(source_text: str, catalog: Iterable[str] = COMPONENTS) -> ClassifiedImports:
    """Classify the imports of a component source file.

    Framework imports (`react`, `react-dom`, ...) are discarded. `@/` imports
    are local modules. Relative imports are internal components when their
    kebab-cased name is in the catalog and are dropped otherwise. Every other
    specifier is an external package.

    Args:
        source_text: Component source text
        catalog: Known component names

    Returns:
        ClassifiedImports with de-duplicated entries in first-seen order
    """
    known = set(catalog)
    external: list[str] = []
    internal: list[str] = []
    local: list[str] = []

    for specifier in scan_import_specifiers(source_text):
        if specifier.startswith(FRAMEWORK_PACKAGE):
            continue

        if specifier.startswith(LOCAL_ALIAS_PREFIX):
            local.append(specifier)
            continue

        if specifier.startswith("./") or specifier.startswith("../"):
            name = component_name_for_relative(specifier)
            if name in known:
                internal.append(name)
            else:
                logger.debug(
                    "Dropping relative import %r: %r is not a catalog component", specifier, name
                )
            continue

        external.append(package_name_for(specifier))

    return ClassifiedImports(
        external_packages=tuple(_unique(external)),
        internal_components=tuple(_unique(internal)),
        local_module_refs=tuple(_unique(local)),
    )


def _unique(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))
