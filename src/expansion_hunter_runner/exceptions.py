"""
Errors raised while resolving the parameters of a single ExpansionHunter job.
Every one of them is terminal for the job-array task that raises it.
"""


class ExpansionHunterRunnerError(Exception):
    """Base class for all errors raised by this package."""


class UsageError(ExpansionHunterRunnerError):
    """A required input is missing or the job-array index does not fit the manifest."""


class UnresolvedGenomeError(ExpansionHunterRunnerError):
    def __init__(self, input_file: str, fingerprint: int) -> None:
        self.input_file = input_file
        self.fingerprint = fingerprint
        super().__init__(
            f'Genome length {fingerprint} for {input_file} was not matched, '
            'you may need to specify the genome build directly using the -g flag.'
        )


class MissingSampleIdError(ExpansionHunterRunnerError):
    """No @RG line in the alignment header carries a sample (SM) name."""


class MissingParameterError(ExpansionHunterRunnerError):
    """One or more ExpansionHunter parameters were left empty after resolution."""


class FilesystemError(ExpansionHunterRunnerError):
    """The output directory could not be created."""
