"""
Build configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.station_list.table import SortPolicy


@dataclass
class BuildConfig:
    """
    Where the builder reads and writes, and how it lays out the list.

    Relative file names resolve against ``root`` (the current directory
    when unset).
    """
    root: Optional[str] = None
    data_file: str = "list.json"
    readme_file: str = "README.MD"
    template_file: str = "index.html"
    split: bool = False  # Separate free and paid tables
    sort_policy: SortPolicy = SortPolicy.CATEGORY
    strict: bool = False

    def __post_init__(self):
        self.root = self.root or os.getcwd()
        if isinstance(self.sort_policy, str):
            self.sort_policy = SortPolicy(self.sort_policy)

    def resolve(self, name: str) -> Path:
        """Resolve a configured file name against the root directory."""
        path = Path(name)
        if path.is_absolute():
            return path
        return Path(self.root) / path

    @property
    def data_path(self) -> Path:
        return self.resolve(self.data_file)

    @property
    def readme_path(self) -> Path:
        return self.resolve(self.readme_file)

    @property
    def template_path(self) -> Path:
        return self.resolve(self.template_file)
