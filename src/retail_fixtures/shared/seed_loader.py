"""
Seed text loading for the retail fixture generator.

Seed sources are plain text files of blank-line separated groups. The first
non-blank line of a group is its label and the following lines are its
members:

    Beverages
    Cola
    Sparkling Water

    Snacks
    Potato Chips

Group order and member order are preserved because they decide the IDs of
everything generated from them.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import SeedEncodingError, SeedFileNotFoundError, SeedLoadError
from .models import SeedGroup

logger = logging.getLogger(__name__)


def parse_seed_text(text: str) -> list[SeedGroup]:
    """
    Split seed text into labelled groups.

    Lines are trimmed; a blank line closes the current group; a group whose
    label would be empty is never emitted.

    Args:
        text: Raw seed text

    Returns:
        Groups in input order
    """
    groups: list[SeedGroup] = []
    label = ""
    members: list[str] = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            if label:
                groups.append(SeedGroup(label=label, members=members))
                label, members = "", []
        elif not label:
            label = line
        else:
            members.append(line)

    if label:
        groups.append(SeedGroup(label=label, members=members))

    return groups


@dataclass
class SeedSourceInfo:
    """Information about a seed source and its configuration."""

    name: str
    filename: str
    description: str = ""


@dataclass
class LoadResult:
    """Result of loading a seed source."""

    name: str
    groups: list[SeedGroup]
    load_time: float
    source: str
    warnings: list[str] = field(default_factory=list)

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def member_count(self) -> int:
        return sum(len(group.members) for group in self.groups)


class SeedCache:
    """In-memory cache of parsed seed files keyed by path and mtime."""

    def __init__(self):
        self._cache: dict[str, list[SeedGroup]] = {}

    def _get_cache_key(self, file_path: Path, file_mtime: float) -> str:
        return f"{file_path}:{file_mtime}"

    def get(self, file_path: Path) -> list[SeedGroup] | None:
        """Get cached groups if the file has not changed."""
        try:
            cache_key = self._get_cache_key(file_path, file_path.stat().st_mtime)
        except OSError:
            return None

        groups = self._cache.get(cache_key)
        if groups is not None:
            logger.debug(f"Cache hit for {file_path}")
        return groups

    def set(self, file_path: Path, groups: list[SeedGroup]) -> None:
        """Cache parsed groups."""
        try:
            cache_key = self._get_cache_key(file_path, file_path.stat().st_mtime)
        except OSError as e:
            logger.warning(f"Could not cache seed data for {file_path}: {e}")
            return

        self._cache[cache_key] = groups
        logger.debug(f"Cached seed data for {file_path}")

    def clear(self) -> None:
        self._cache.clear()
        logger.debug("Seed cache cleared")


class SeedLoader:
    """
    Loads the categories, countries and companies seed sources.

    Sources come from files in ``seed_path`` or, when ``profile`` is given,
    from a packaged profile under ``retail_fixtures.sourcedata``.

    By default a missing file is not an error: the source loads as empty and
    the result carries a warning. With ``strict=True`` it raises
    SeedFileNotFoundError instead.
    """

    SOURCES = {
        "categories": SeedSourceInfo(
            name="categories",
            filename="categories.txt",
            description="Product categories, each followed by its items",
        ),
        "countries": SeedSourceInfo(
            name="countries",
            filename="countries.txt",
            description="Countries, each followed by its cities",
        ),
        "companies": SeedSourceInfo(
            name="companies",
            filename="companies.txt",
            description="Brand names group, then franchise names group",
        ),
    }

    def __init__(
        self,
        seed_path: str | Path = ".",
        filenames: dict[str, str] | None = None,
        profile: str | None = None,
        strict: bool = False,
        use_cache: bool = True,
        encoding: str = "utf-8",
    ):
        """
        Initialize the SeedLoader.

        Args:
            seed_path: Directory containing seed files
            filenames: Overrides for source file names, keyed by source name
            profile: Packaged profile name; replaces file reading when set
            strict: Raise on missing files instead of loading them as empty
            use_cache: Whether to cache parsed files
            encoding: Preferred file encoding
        """
        self.seed_path = Path(seed_path)
        self.filenames = {
            name: info.filename for name, info in self.SOURCES.items()
        }
        self.filenames.update(filenames or {})
        self.profile = profile
        self.strict = strict
        self.encoding = encoding

        self.cache = SeedCache() if use_cache else None
        self._load_results: dict[str, LoadResult] = {}

        logger.info(
            f"SeedLoader initialized with "
            f"{'profile ' + profile if profile else 'path ' + str(self.seed_path)}"
        )

    def _find_file(self, filename: str) -> Path:
        """
        Find a seed file, trying the seed directory then the working directory.

        Raises:
            SeedFileNotFoundError: If the file cannot be found
        """
        candidate = Path(filename)
        if candidate.is_absolute():
            search_paths = [candidate]
        else:
            search_paths = [self.seed_path / filename, Path.cwd() / filename]

        for path in search_paths:
            if path.exists() and path.is_file():
                return path

        raise SeedFileNotFoundError(self.seed_path / filename, search_paths)

    def _read_text_with_encoding(
        self, file_path: Path, encodings: list[str] | None = None
    ) -> str:
        """
        Read a text file, trying multiple encodings if needed.

        Raises:
            SeedEncodingError: If the file cannot be decoded with any encoding
            SeedLoadError: If the file cannot be read
        """
        encodings = encodings or list(dict.fromkeys([self.encoding, "utf-8", "latin-1"]))

        last_error = None
        for encoding in encodings:
            try:
                return file_path.read_text(encoding=encoding)
            except (UnicodeDecodeError, UnicodeError) as e:
                last_error = e
                continue
            except OSError as e:
                raise SeedLoadError("File could not be read", file_path, e)

        raise SeedEncodingError(file_path, encodings, last_error)

    def _load_profile_text(self, name: str) -> str:
        from retail_fixtures.sourcedata import get_profile

        profile = get_profile(self.profile)
        return getattr(profile, name.upper())

    def load_source(self, name: str, force_reload: bool = False) -> LoadResult:
        """
        Load a single seed source.

        Args:
            name: Source name ("categories", "countries" or "companies")
            force_reload: Whether to bypass cache

        Returns:
            LoadResult: Result of loading operation

        Raises:
            SeedLoadError: If the name is unknown or the file is unreadable
            SeedFileNotFoundError: If the file is missing in strict mode
        """
        if name not in self.SOURCES:
            available = list(self.SOURCES.keys())
            raise SeedLoadError(f"Unknown seed source '{name}'. Available: {available}")

        start_time = time.time()
        warnings: list[str] = []

        if self.profile:
            groups = parse_seed_text(self._load_profile_text(name))
            source = f"profile:{self.profile}"
        else:
            try:
                file_path = self._find_file(self.filenames[name])
            except SeedFileNotFoundError as e:
                if self.strict:
                    raise
                logger.warning(f"Seed source '{name}' unavailable: {e}")
                result = LoadResult(
                    name=name,
                    groups=[],
                    load_time=time.time() - start_time,
                    source=str(e.file_path),
                    warnings=[str(e)],
                )
                self._load_results[name] = result
                return result

            source = str(file_path)
            groups = None
            if self.cache and not force_reload:
                groups = self.cache.get(file_path)
                if groups is not None:
                    warnings.append("Data loaded from cache")

            if groups is None:
                logger.info(f"Loading seed source: {name} from {file_path}")
                groups = parse_seed_text(self._read_text_with_encoding(file_path))
                if self.cache:
                    self.cache.set(file_path, groups)

        if not groups:
            warnings.append(f"Seed source '{name}' contains no groups")
            logger.warning(f"Seed source '{name}' ({source}) contains no groups")

        result = LoadResult(
            name=name,
            groups=groups,
            load_time=time.time() - start_time,
            source=source,
            warnings=warnings,
        )
        self._load_results[name] = result

        logger.info(
            f"Loaded {name}: {result.group_count} groups, "
            f"{result.member_count} members in {result.load_time:.3f}s"
        )
        return result

    def load_categories(self) -> list[SeedGroup]:
        """Category groups: label is the category, members are its items."""
        return self.load_source("categories").groups

    def load_countries(self) -> list[SeedGroup]:
        """Country groups: label is the country, members are its cities."""
        return self.load_source("countries").groups

    def load_companies(self) -> tuple[list[str], list[str]]:
        """
        Brand and franchise names from the companies source.

        The first group lists brands and the second franchises; labels are
        ignored. Missing groups load as empty lists.
        """
        result = self.load_source("companies")
        groups = result.groups
        if len(groups) < 2:
            message = (
                f"Companies source has {len(groups)} group(s); "
                "expected brands then franchises"
            )
            result.warnings.append(message)
            logger.warning(message)

        brands = groups[0].members if len(groups) > 0 else []
        franchises = groups[1].members if len(groups) > 1 else []
        return brands, franchises

    def get_load_result(self, name: str) -> LoadResult:
        """
        Get load result for a specific source.

        Raises:
            SeedLoadError: If the source has not been loaded
        """
        if name not in self._load_results:
            raise SeedLoadError(f"Seed source '{name}' not loaded")
        return self._load_results[name]

    def clear_cache(self) -> None:
        if self.cache:
            self.cache.clear()

    def get_summary(self) -> dict[str, Any]:
        """Summary information about loaded sources."""
        return {
            "total_sources": len(self.SOURCES),
            "loaded_sources": len(self._load_results),
            "sources": {
                name: {
                    "source": result.source,
                    "groups": result.group_count,
                    "members": result.member_count,
                    "warnings": len(result.warnings),
                }
                for name, result in self._load_results.items()
            },
        }
