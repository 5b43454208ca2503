# src/build_properties/core/properties/layout.py
"""Layout do build: onde ficam a raiz e o diretório de settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildLayout:
    """
    Diretórios já resolvidos de um build.

    A descoberta desses diretórios acontece fora do core; aqui o layout
    é apenas carregado pelo estado Unloaded para resolver o diretório de
    load quando o chamador não informa um explicitamente.
    """

    root_directory: Path
    settings_dir: Path

    @classmethod
    def for_root(cls, root_directory: Path) -> "BuildLayout":
        """Layout em que o diretório de settings coincide com a raiz."""
        root = Path(root_directory)
        return cls(root_directory=root, settings_dir=root)
