from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from polaris.errors import ImportNotFound, PolarisError
from polaris.evaluation.evaluator import Evaluator
from polaris.feeder import Feeder
from polaris.types.environment import Environment

logger = logging.getLogger(__name__)


class Importer:
    """
    Loads source files into a shared environment, each at most once.

    A name is used as-is when it names a regular file; otherwise each include
    directory is tried in the order given and the first match wins.
    """

    def __init__(
        self,
        evaluator: Evaluator,
        env: Environment,
        include_dirs: Iterable[str | Path] = (),
    ):
        self.evaluator = evaluator
        self.env = env
        self.include_dirs: list[Path] = [Path(d) for d in include_dirs]
        self.imported: set[Path] = set()

    def resolve(self, name: str) -> Optional[Path]:
        candidate = Path(name)
        if candidate.is_file():
            return candidate.resolve()
        for root in self.include_dirs:
            candidate = root / name
            if candidate.is_file():
                return candidate.resolve()
        return None

    def load(self, name: str) -> None:
        path = self.resolve(name)
        if path is None:
            raise ImportNotFound(f"File not found : {name}")

        if path in self.imported:
            logger.debug("already imported %s", path)
            return

        # Marked up front so a module that (indirectly) imports itself stops here.
        self.imported.add(path)
        logger.info("importing %s", path)
        try:
            self._read_file(path)
        except PolarisError:
            self.imported.discard(path)
            raise

    def _read_file(self, path: Path) -> None:
        feeder = Feeder(self.evaluator, self.env)
        try:
            with path.open(encoding="utf-8") as fh:
                for line in fh:
                    feeder.feed(line.rstrip("\r\n"))
        except OSError as err:
            raise ImportNotFound(f"Unable to open file : {path}") from err

        if feeder.pending:
            logger.warning("%s ends inside an unterminated form; it was ignored", path)
