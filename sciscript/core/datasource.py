"""
Tabular ingestion for sciscript.

DataSource is the "I have a table" abstraction. It reads a delimited text
file or URL into named float columns and hands the rows to the conversion
layer as a plain sequence of sequences. It does not know what the rows
will be used for.

Delimiter sniffing and header detection happen here; the conversion layer
only ever sees a rectangular dynamic value.

Usage:
    from sciscript.core.datasource import DataSource, read_matrix

    rows = read_matrix("data.csv")              # [[1.0, 2.0], [3.0, 4.0]]
    ds = DataSource.from_url(url, timeout=10)
    ds.keys()                                   # ('x', 'y')
    x = ds['x']
"""

from __future__ import annotations

import csv
import io
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import numpy as np
import pandas as pd
from numpy.typing import NDArray

from sciscript.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_URL_SCHEMES = ('http://', 'https://')


@dataclass(frozen=True)
class DataSource:
    """
    Rectangular table of float columns. Immutable.

    Construct via factory classmethods, not directly.
    """
    _columns: dict[str, NDArray[np.floating[Any]]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> tuple[str, ...]:
        """Column names in file order."""
        return tuple(self._columns.keys())

    def __getitem__(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Access a named column.

        Raises:
            KeyError: If key not found, listing available columns
        """
        if key not in self._columns:
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {list(self._columns)}"
            )
        return self._columns[key].copy()

    def __contains__(self, key: str) -> bool:
        return key in self._columns

    # === Properties ===

    @property
    def n_observations(self) -> int:
        return self._metadata.get('n_observations', 0)

    @property
    def n_columns(self) -> int:
        return len(self._columns)

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    def to_rows(self) -> list[list[float]]:
        """Rows as a sequence of sequences, ready for build_matrix()."""
        table = np.column_stack([self._columns[k] for k in self._columns])
        return table.tolist()

    # === Factory Methods ===

    @classmethod
    def from_file(cls, path: str | Path) -> DataSource:
        """
        Read a delimited text file.

        Raises:
            DataSourceError: If the file is missing, unreadable or not numeric
        """
        path = Path(path)
        logger.debug("reading table from %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"cannot read {path}: {e}", source=str(path)) from e
        return cls._parse(text, source=str(path))

    @classmethod
    def from_url(cls, url: str, *, timeout: float = DEFAULT_TIMEOUT) -> DataSource:
        """
        Download and read a delimited text table.

        Args:
            url: http(s) URL
            timeout: Seconds to wait for the connection and each read

        Raises:
            DataSourceError: On HTTP errors, timeouts or unparsable content
        """
        if timeout is None or timeout <= 0:
            raise DataSourceError(
                f"timeout must be a positive number of seconds, got {timeout!r}",
                source=url,
            )
        logger.debug("fetching table from %s (timeout=%.1fs)", url, timeout)
        req = urllib.request.Request(url, method="GET")
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                text = resp.read().decode("utf-8")
        except urllib.error.HTTPError as e:
            raise DataSourceError(f"HTTP {e.code} from {url}: {e.reason}", source=url) from e
        except (urllib.error.URLError, TimeoutError, OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"failed GET {url}: {e}", source=url) from e
        return cls._parse(text, source=url)

    @classmethod
    def from_rows(cls, rows: list[list[float]], columns: list[str] | None = None) -> DataSource:
        """Build from in-memory rows (mainly for tests and round trips)."""
        table = np.asarray(rows, dtype=np.float64)
        if table.ndim != 2 or table.size == 0:
            raise DataSourceError(f"rows must form a non-empty 2-D table, got shape {table.shape}")
        names = columns or [f"column_{j}" for j in range(table.shape[1])]
        if len(names) != table.shape[1]:
            raise DataSourceError(
                f"{len(names)} column names given for {table.shape[1]} columns"
            )
        return cls(
            _columns={name: table[:, j].copy() for j, name in enumerate(names)},
            _metadata={'n_observations': table.shape[0], 'source': 'rows', 'header': columns is not None},
        )

    @classmethod
    def build(cls, source: str | Path, *, timeout: float = DEFAULT_TIMEOUT) -> DataSource:
        """
        Dispatch to from_url() or from_file().

        Examples:
            DataSource.build("data.csv")
            DataSource.build("https://example.org/data.csv", timeout=5)
        """
        if isinstance(source, str) and source.lower().startswith(_URL_SCHEMES):
            return cls.from_url(source, timeout=timeout)
        return cls.from_file(source)

    @classmethod
    def _parse(cls, text: str, *, source: str) -> DataSource:
        if not text.strip():
            raise DataSourceError(f"{source}: table is empty", source=source)

        delimiter = _sniff_delimiter(text)
        try:
            raw = pd.read_csv(
                io.StringIO(text),
                sep=delimiter,
                header=None,
                dtype=str,
                skipinitialspace=True,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
            raise DataSourceError(f"{source}: cannot parse table: {e}", source=source) from e

        raw = raw.dropna(how='all')
        if raw.empty:
            raise DataSourceError(f"{source}: table has no data rows", source=source)
        header = _detect_header(raw)
        if header is not None:
            names = header
            body = raw.iloc[1:]
            logger.debug("%s: using first row as header %s", source, names)
        else:
            names = [f"column_{j}" for j in range(raw.shape[1])]
            body = raw

        if body.empty:
            raise DataSourceError(f"{source}: table has no data rows", source=source)

        numeric = body.apply(pd.to_numeric, errors='coerce')
        bad = numeric.isna()
        if bad.to_numpy().any():
            i, j = np.argwhere(bad.to_numpy())[0]
            raise DataSourceError(
                f"{source}: non-numeric value {body.iat[i, j]!r} in data row {i}, column {j}",
                source=source,
            )

        table = numeric.to_numpy(dtype=np.float64)
        if not np.all(np.isfinite(table)):
            raise DataSourceError(f"{source}: table contains non-finite values", source=source)

        if len(set(names)) != len(names):
            raise DataSourceError(f"{source}: duplicate column names {names}", source=source)

        return cls(
            _columns={name: table[:, j].copy() for j, name in enumerate(names)},
            _metadata={
                'n_observations': table.shape[0],
                'source': source,
                'header': header is not None,
            },
        )


def _sniff_delimiter(text: str) -> str:
    """Guess the field delimiter from the first lines; single columns default to a comma."""
    sample = "\n".join(text.strip().splitlines()[:20])
    try:
        dialect = csv.Sniffer().sniff(sample, delimiters=",;\t| ")
    except csv.Error:
        return ","
    if dialect.delimiter == " ":
        return r"\s+"
    return dialect.delimiter


def _detect_header(raw: pd.DataFrame) -> list[str] | None:
    """Treat the first row as a header when none of its cells is numeric."""
    first = raw.iloc[0]
    parsed = pd.to_numeric(first, errors='coerce')
    if parsed.notna().any():
        return None
    return [str(cell).strip() for cell in first]


def read_table(source: str | Path, *, timeout: float = DEFAULT_TIMEOUT) -> list[list[float]]:
    """
    Read a file or URL into a sequence of rows.

    Returns:
        list of rows compatible with build_matrix()

    Raises:
        DataSourceError: On any file, network or parse problem
    """
    return DataSource.build(source, timeout=timeout).to_rows()


def read_matrix(path: str | Path, *, timeout: float = DEFAULT_TIMEOUT) -> list[list[float]]:
    """Read tabular data shaped for the matrix model (alias of read_table)."""
    return read_table(path, timeout=timeout)
