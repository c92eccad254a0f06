"""
Site Builder Core Engine

Runs the build pipeline: load the station list, render it into Markdown
tables, splice the tables into the README, render the README to HTML and
splice that into the site template.

Every stage either completes or stops the build. Nothing is retried or
rolled back.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from src.station_list.loader import StationLoader
from src.station_list.splicer import (
    FREE_LIST_MARKERS,
    LIST_MARKERS,
    PAID_LIST_MARKERS,
    README_MARKERS,
    MarkerPair,
    splice_all,
    splice_markers,
)
from src.station_list.station import Station
from src.station_list.table import render_table

from .config import BuildConfig
from .renderers.markdown_renderer import MarkdownRenderer


class BuildStage(Enum):
    """Pipeline stages, in the order they are reached."""
    START = "start"
    LOADED = "loaded"
    TABLES_RENDERED = "tables_rendered"
    README_UPDATED = "readme_updated"
    HTML_RENDERED = "html_rendered"
    TEMPLATE_UPDATED = "template_updated"
    DONE = "done"
    ERROR = "error"

    @property
    def label(self) -> str:
        """What the pipeline does to reach this stage."""
        return STAGE_LABELS.get(self, self.value)


STAGE_LABELS = {
    BuildStage.LOADED: "loading station list",
    BuildStage.TABLES_RENDERED: "rendering tables",
    BuildStage.README_UPDATED: "updating README",
    BuildStage.HTML_RENDERED: "rendering HTML",
    BuildStage.TEMPLATE_UPDATED: "updating template",
}


class DocumentReadError(OSError):
    """Raised when a target document cannot be decoded."""
    pass


@dataclass
class BuildResult:
    """What a build produced."""
    stations: list[Station]
    tables: list[tuple[MarkerPair, str]] = field(default_factory=list)
    readme: str = ""
    html: str = ""
    template: str = ""

    @property
    def station_count(self) -> int:
        return len(self.stations)


class SiteBuilder:
    """
    Main build engine.

    Owns the marker regions of the README and the README region of the
    template; everything else in both files is left as written.
    """

    README_PADDING = "\n\n"
    TEMPLATE_PADDING = ""

    def __init__(self, config: Optional[BuildConfig] = None):
        self.config = config or BuildConfig()
        self.stage = BuildStage.START
        self.failed_stage: Optional[BuildStage] = None

    def build(self, save: bool = True) -> BuildResult:
        """
        Run the whole pipeline.

        Args:
            save: If False, nothing is written to disk

        Returns:
            The BuildResult

        Raises:
            FileNotFoundError, OSError: A file is missing or unwritable
            DocumentReadError: A document is not valid UTF-8
            ParseError: The station list is malformed
            MarkerNotFoundError: A document lacks its markers
        """
        self.stage = BuildStage.START
        self.failed_stage = None
        try:
            return self._run(save)
        except Exception:
            self.failed_stage = self._next_stage()
            self.stage = BuildStage.ERROR
            raise

    def _run(self, save: bool) -> BuildResult:
        config = self.config

        stations = self.load_stations()
        result = BuildResult(stations=stations)
        self.stage = BuildStage.LOADED

        print("[TABLE] Rendering Markdown tables")
        result.tables = self.render_tables(stations)
        self.stage = BuildStage.TABLES_RENDERED

        readme_path = config.readme_path
        print(f"[README] Updating: {readme_path}")
        result.readme = splice_all(
            _read_document(readme_path),
            result.tables,
            padding=self.README_PADDING,
            source=readme_path.name,
        )
        if save:
            _write_document(readme_path, result.readme)
        self.stage = BuildStage.README_UPDATED

        print("[HTML] Rendering README to HTML")
        result.html = MarkdownRenderer.render(result.readme)
        self.stage = BuildStage.HTML_RENDERED

        template_path = config.template_path
        print(f"[HTML] Updating: {template_path}")
        result.template = splice_markers(
            _read_document(template_path),
            README_MARKERS,
            result.html,
            padding=self.TEMPLATE_PADDING,
            source=template_path.name,
        )
        if save:
            _write_document(template_path, result.template)
        self.stage = BuildStage.TEMPLATE_UPDATED

        self.stage = BuildStage.DONE
        return result

    def load_stations(self) -> list[Station]:
        """Read and validate the station list."""
        path = self.config.data_path
        print(f"[LOAD] Reading: {path}")
        loader = StationLoader(base_path=Path(self.config.root), strict=self.config.strict)
        stations = loader.load_file(path)
        print(f"[LOAD] {len(stations)} station(s) loaded, {len(loader.rejected)} skipped")
        return stations

    def render_tables(self, stations: list[Station]) -> list[tuple[MarkerPair, str]]:
        """Render the tables for the configured layout, paired with their markers."""
        policy = self.config.sort_policy
        if self.config.split:
            return [
                (FREE_LIST_MARKERS, render_table(stations, is_free=True, policy=policy)),
                (PAID_LIST_MARKERS, render_table(stations, is_free=False, policy=policy)),
            ]
        return [(LIST_MARKERS, render_table(stations, policy=policy))]

    def _next_stage(self) -> BuildStage:
        """The stage that was being attempted when the build stopped."""
        order = list(BuildStage)
        return order[order.index(self.stage) + 1]


def _read_document(path: Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    # newline="" keeps line endings outside the markers byte-identical
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise DocumentReadError(f"Document {path} is not valid UTF-8: {e}") from e


def _write_document(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    print(f"[SAVED] {path}")
