"""One source file's identity: its dotted module name and its imports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..lexing import ImportStatement, Lexer, LexResult
from ..logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def name_from_path(file_path: PathLike, source_root: Optional[PathLike] = None) -> str:
    """Derive a dotted module name from a file path.

    ``src/Foo/Bar.elm`` under source root ``src`` becomes ``Foo.Bar``. Without
    a source root, or when the file lies outside it, the file stem is used.
    """
    path = Path(file_path)
    if source_root is not None:
        try:
            relative = path.relative_to(source_root)
        except ValueError:
            pass
        else:
            return ".".join(relative.with_suffix("").parts)
    return path.stem


@dataclass(frozen=True)
class Module:
    """A parsed source file.

    Imported modules are recorded by name only; they are never parsed from
    here.

    Attributes:
        file_path: Path of the source file
        dotted_name: Module name, from the module statement or the path
        imports: Import statements in declaration order
    """

    file_path: str
    dotted_name: str
    imports: tuple[ImportStatement, ...] = ()

    @classmethod
    def from_file(
        cls,
        file_path: PathLike,
        source_root: Optional[PathLike] = None,
        encoding: str = "utf-8",
    ) -> Module:
        """Read and lex ``file_path``.

        Raises:
            SourceFileNotFoundError: If the file does not exist
            FileAccessError: If the file cannot be read
        """
        lexer = Lexer.from_file(file_path, encoding=encoding)
        return cls._from_lex_result(str(file_path), lexer.run(), source_root)

    @classmethod
    def from_source(
        cls,
        file_path: PathLike,
        content: str,
        source_root: Optional[PathLike] = None,
    ) -> Module:
        """Build a module from in-memory content."""
        lexer = Lexer(content.strip(), path=str(file_path))
        return cls._from_lex_result(str(file_path), lexer.run(), source_root)

    @classmethod
    def _from_lex_result(
        cls, file_path: str, result: LexResult, source_root: Optional[PathLike]
    ) -> Module:
        statement = result.module_statement
        if statement is not None and statement.dotted_name:
            name = statement.dotted_name
        else:
            name = name_from_path(file_path, source_root)
            logger.debug(f"No usable module statement in {file_path}, using '{name}'")

        imports = tuple(imp for imp in result.imports if imp.dotted_name)
        return cls(file_path=file_path, dotted_name=name, imports=imports)

    @property
    def import_names(self) -> tuple[str, ...]:
        """Dotted names of the imported modules, in declaration order."""
        return tuple(imp.dotted_name for imp in self.imports)
