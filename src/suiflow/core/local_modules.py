"""Copy project-local (`@/`) modules that component templates depend on.

A template importing `@/lib/utils` needs `lib/utils.ts` in the consumer
project. The bundled project template tree mirrors the alias root, so the
module is found at `<templates_root>/lib/utils.<ext>` and copied to
`<project_root>/lib/utils.<ext>`.

A module that already exists in the project is left alone and its own
imports are not rescanned, so modules added to a template later do not reach
projects that already have an older copy.
"""

import logging
import shutil
from pathlib import Path

from suiflow.core.imports import LOCAL_ALIAS_PREFIX, scan_local_module_refs
from suiflow.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

# Probe order when resolving an aliased path to a template file
MODULE_EXTENSIONS: tuple[str, ...] = (".ts", ".tsx", ".js", ".jsx")


def find_module_template(templates_root: Path, relative_path: str) -> Path | None:
    """Find the template file for an alias-stripped module path.

    Returns:
        First existing `<templates_root>/<relative_path><ext>`, or None
    """
    for extension in MODULE_EXTENSIONS:
        candidate = templates_root / f"{relative_path}{extension}"
        if candidate.is_file():
            return candidate
    return None


def copy_local_modules(
    source_text: str,
    project_root: Path,
    templates_root: Path,
    feedback: UserFeedback,
) -> list[str]:
    """Copy every `@/` module referenced by `source_text` into the project.

    Copied modules are scanned in turn, so transitive local modules are copied
    too. Unresolvable references and copy failures are reported and skipped.

    Args:
        source_text: Source text to scan for `@/` imports
        project_root: Consumer project directory the alias resolves against
        templates_root: Bundled template tree mirrored under the alias
        feedback: Where warnings and errors are reported

    Returns:
        Specifiers that were copied, including transitive ones
    """
    copied: list[str] = []

    for specifier in scan_local_module_refs(source_text):
        relative_path = specifier.removeprefix(LOCAL_ALIAS_PREFIX)
        template_path = find_module_template(templates_root, relative_path)
        if template_path is None:
            feedback.warning(f"Utility {specifier} referenced but not found in template.")
            continue

        destination = project_root / f"{relative_path}{template_path.suffix}"
        if destination.exists():
            logger.debug("Local module %s already present at %s", specifier, destination)
            continue

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(template_path, destination)
            module_text = template_path.read_text(encoding="utf-8")
        except OSError as e:
            feedback.error(f"Failed to copy utility {specifier}: {e}")
            continue

        copied.append(specifier)
        feedback.info(f"Utility file {specifier} added.")

        copied.extend(copy_local_modules(module_text, project_root, templates_root, feedback))

    return copied
