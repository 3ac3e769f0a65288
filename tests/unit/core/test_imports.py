"""Tests for import scanning and classification."""

from suiflow.core.imports import (
    classify_imports,
    component_name_for_relative,
    package_name_for,
    scan_import_specifiers,
    scan_local_module_refs,
)

MIXED_SOURCE = """\
import React, { useState } from 'react';
import { formatDistance } from "date-fns";
import { useSuiClientQuery } from '@mysten/dapp-kit/hooks';
import { NftCard } from './NftCard';
import { Helper } from './helpers/formatHelper';
import { cn } from '@/lib/utils';
"""


def test_classify_mixed_source_returns_one_entry_per_kind() -> None:
    """Test that each kind of import lands in exactly one category."""
    result = classify_imports(MIXED_SOURCE)

    assert result.external_packages == ("date-fns", "@mysten/dapp-kit")
    assert result.internal_components == ("nft-card",)
    assert result.local_module_refs == ("@/lib/utils",)


def test_classify_discards_framework_imports() -> None:
    """Test that react and react-* packages are never reported as external."""
    source = (
        "import React from 'react';\n"
        "import { createPortal } from 'react-dom';\n"
        "import { X } from 'lucide-react';\n"
    )

    result = classify_imports(source)

    assert result.external_packages == ("lucide-react",)


def test_classify_includes_type_only_imports() -> None:
    """Test that `import type` statements are scanned like value imports."""
    source = "import type { SuiObjectData } from '@mysten/sui/client';\n"

    result = classify_imports(source)

    assert result.external_packages == ("@mysten/sui",)


def test_classify_deduplicates_in_first_seen_order() -> None:
    """Test that repeated imports are reported once."""
    source = (
        "import { ChevronDown } from 'lucide-react';\n"
        "import { format } from 'date-fns';\n"
        "import { ChevronUp } from 'lucide-react';\n"
        "import { NftCard } from './NftCard';\n"
        "import type { NftCardProps } from './NftCard';\n"
    )

    result = classify_imports(source)

    assert result.external_packages == ("lucide-react", "date-fns")
    assert result.internal_components == ("nft-card",)


def test_classify_uses_parent_segment_for_index_imports() -> None:
    """Test that index and trailing-slash imports use the directory name."""
    source = (
        "import { TokenInput } from '../token-input/index';\n"
        "import { Connector } from '../connector/';\n"
    )

    result = classify_imports(source)

    assert result.internal_components == ("token-input", "connector")


def test_classify_respects_custom_catalog() -> None:
    """Test that internal classification checks the given catalog."""
    source = "import { B } from './B';\nimport { D } from './D';\n"

    result = classify_imports(source, catalog=("a", "b", "c"))

    assert result.internal_components == ("b",)
    assert result.external_packages == ()


def test_classify_ignores_malformed_imports() -> None:
    """Test that unterminated specifiers are skipped without raising."""
    source = "import { x } from 'left-pad;\nimport y from left-pad;\n"

    result = classify_imports(source)

    assert result.external_packages == ()
    assert result.internal_components == ()
    assert result.local_module_refs == ()


def test_classify_empty_source() -> None:
    """Test that a file without imports yields empty categories."""
    result = classify_imports("export const answer = 42;\n")

    assert result.external_packages == ()
    assert result.internal_components == ()
    assert result.local_module_refs == ()


def test_scan_import_specifiers_handles_multiline_imports() -> None:
    """Test that multi-line named imports are found by their from clause."""
    source = "import {\n  ChevronLeft,\n  ChevronRight,\n} from 'lucide-react';\n"

    assert scan_import_specifiers(source) == ["lucide-react"]


def test_scan_local_module_refs_only_returns_alias_imports() -> None:
    source = "import { cn } from '@/lib/utils';\nimport { x } from '@scope/pkg';\n"

    assert scan_local_module_refs(source) == ["@/lib/utils"]


def test_package_name_for_scoped_and_plain_specifiers() -> None:
    assert package_name_for("@mysten/dapp-kit") == "@mysten/dapp-kit"
    assert package_name_for("@mysten/sui/client") == "@mysten/sui"
    assert package_name_for("date-fns/locale/en-US") == "date-fns"
    assert package_name_for("clsx") == "clsx"


def test_component_name_for_relative_strips_extensions() -> None:
    assert component_name_for_relative("./BalanceDisplay.tsx") == "balance-display"
    assert component_name_for_relative("../ui/NftCard.js") == "nft-card"
    assert component_name_for_relative("./Address2Display") == "address2-display"
