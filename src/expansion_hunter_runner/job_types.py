"""
This module defines shared data structures passed between the parameter
resolver, the genome matcher and the ExpansionHunter job.
"""

from dataclasses import dataclass, fields

from expansion_hunter_runner.exceptions import MissingParameterError

# Flag that overrides each parameter on the command line, used in error hints.
_OVERRIDE_FLAGS = {
    'reference_path': '-g',
    'catalog_path': '-c',
    'output_dir': '-o',
}


@dataclass(frozen=True)
class GenomeResolution:
    """Outcome of matching an input file to a reference genome and variant catalog."""

    build_id: str | None  # None when the reference was supplied explicitly
    reference_path: str
    catalog_path: str | None  # None when the build has no catalog mapping


@dataclass(frozen=True)
class ResolvedJobParameters:
    """Everything ExpansionHunter needs to process one input file."""

    input_file: str
    sample_id: str
    reference_path: str | None
    catalog_path: str | None
    output_dir: str

    @property
    def output_prefix(self) -> str:
        return f'{self.output_dir.rstrip("/")}/{self.sample_id}'

    def check_complete(self) -> None:
        """
        Raises MissingParameterError naming every empty field.
        ExpansionHunter must never be launched with a blank parameter.
        """
        missing: list[str] = [field.name for field in fields(self) if not getattr(self, field.name)]
        if not missing:
            return

        hints = [f'{name} (set it with {_OVERRIDE_FLAGS[name]})' for name in missing if name in _OVERRIDE_FLAGS]
        message = f'Missing ExpansionHunter parameters for {self.input_file or "<no input file>"}: {", ".join(missing)}.'
        if hints:
            message += f' Supply {", ".join(hints)}.'
        raise MissingParameterError(message)
