"""CSV result writer adapter.

Appends one delimited line per answered query to a results file.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...config import OutputConfig, get_config
from ...domain.errors import ConfigurationError, GraphError
from ...domain.models import Route
from ...graph.formatting import render_route_paths


@dataclass
class CSVRouteWriter:
    """Result writer appending delimited lines to a file.

    This adapter implements RouteWriterPort.

    Attributes:
        config: Output configuration (results file, delimiter)
    """

    config: OutputConfig = field(default_factory=lambda: get_config().output)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def write_line(self, fields: Sequence[str], path: Optional[Path] = None) -> Path:
        """Append ``fields`` as one line, creating the file if needed.

        Raises:
            ConfigurationError: If no path is given and none is configured.
            GraphError: If the file cannot be written.
        """
        target = self._resolve_path(path)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("a", newline="", encoding="utf-8") as f:
                writer = csv.writer(
                    f, delimiter=self.config.delimiter, lineterminator="\n"
                )
                writer.writerow(fields)
        except OSError as e:
            raise GraphError(
                f"Failed to write results to {target}",
                file_path=str(target),
                cause=e,
            )

        self._logger.debug("Line written", extra={"path": str(target)})
        return target

    def write_route(
        self,
        source: str,
        target: str,
        route: Route,
        path: Optional[Path] = None,
    ) -> Path:
        """Append ``source, target, paths, cost`` for ``route``.

        Tied paths share one field, joined with ``" | "``.
        """
        fields = [
            source,
            target,
            render_route_paths(route.paths),
            str(route.cost),
        ]
        return self.write_line(fields, path)

    def _resolve_path(self, path: Optional[Path]) -> Path:
        if path is not None:
            return Path(path)
        if self.config.results_file is None:
            raise ConfigurationError(
                "No results file configured",
                setting_name="RF_OUTPUT_RESULTS_FILE",
            )
        return self.config.results_file
