"""Run configuration."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

DEFAULT_LEDGER_PREFIX = "家庭账本"
DEFAULT_EXPORT_PREFIX = "wechat_bill"
DEFAULT_EXTENSION = ".csv"
DEFAULT_RULES_FILE = "rules.json"
DEFAULT_OUTPUT_FILE = "ledger_data.json"
DEFAULT_LOG_FILE = "chatlog.md"


@dataclass(frozen=True)
class LedgerConfig:
    """Where a run finds its inputs and puts its outputs.

    File names are resolved against ``work_dir`` unless they are absolute.
    """

    work_dir: Path
    ledger_prefix: str = DEFAULT_LEDGER_PREFIX
    export_prefix: str = DEFAULT_EXPORT_PREFIX
    extension: str = DEFAULT_EXTENSION
    rules_file: str = DEFAULT_RULES_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    log_file: str = DEFAULT_LOG_FILE

    def _resolve(self, name: str) -> Path:
        return self.work_dir / name

    @property
    def rules_path(self) -> Path:
        return self._resolve(self.rules_file)

    @property
    def output_path(self) -> Path:
        return self._resolve(self.output_file)

    @property
    def log_path(self) -> Path:
        return self._resolve(self.log_file)


def load_config(
    work_dir: Optional[str] = None,
    rules_file: Optional[str] = None,
    output_file: Optional[str] = None,
    log_file: Optional[str] = None,
) -> LedgerConfig:
    """Create a run configuration.

    Args:
        work_dir: Directory holding the ledger and exports. If None, checks
            LEDGERSYNC_DIR environment variable, then defaults to the current
            directory
        rules_file: Rules file name or path (LEDGERSYNC_RULES)
        output_file: JSON snapshot name or path (LEDGERSYNC_OUTPUT)
        log_file: Run log name or path (LEDGERSYNC_LOG)

    Returns:
        LedgerConfig instance
    """
    if work_dir is None:
        work_dir = os.environ.get("LEDGERSYNC_DIR")
    if work_dir is None:
        work_dir = os.getcwd()

    config = LedgerConfig(work_dir=Path(work_dir))

    overrides = {
        "rules_file": rules_file or os.environ.get("LEDGERSYNC_RULES"),
        "output_file": output_file or os.environ.get("LEDGERSYNC_OUTPUT"),
        "log_file": log_file or os.environ.get("LEDGERSYNC_LOG"),
    }
    return replace(config, **{k: v for k, v in overrides.items() if v})
