"""
Pandoc invocation.

Locates pandoc (PANDOC env var, then PATH), runs it as a blocking
subprocess, and turns every way that can fail into a
ConverterExecutionError. There are no retries and no timeout.
"""

import logging
import os
import shlex
import shutil
import subprocess
from abc import ABC, abstractmethod

from docxbook import errors
from docxbook.errors import ConverterExecutionError
from docxbook.options import OUTPUT_FORMAT, input_format

logger = logging.getLogger(__name__)

PANDOC_ENV_VAR = "PANDOC"


def find_pandoc(environ=None):
    """
    Locate pandoc. Checks in order:
        1. PANDOC environment variable (must name an existing file)
        2. pandoc command on PATH

    Raises ConverterExecutionError(NOT_FOUND) if neither is available.
    """
    environ = os.environ if environ is None else environ

    env_path = environ.get(PANDOC_ENV_VAR)
    if env_path and os.path.isfile(env_path):
        return env_path
    if env_path:
        logger.warning("%s=%s does not exist, falling back to PATH", PANDOC_ENV_VAR, env_path)

    found = shutil.which("pandoc")
    if found:
        return found

    raise ConverterExecutionError(errors.NOT_FOUND, "searched $PANDOC and PATH")


class Converter(ABC):
    """
    The one seam between the pipeline and the external converter.

    convert():  markdown text in, document file out
    combine():  several document files in, one document file out
    Both return the output path.
    """

    @abstractmethod
    def convert(self, content, options, output):
        ...

    @abstractmethod
    def combine(self, inputs, options, output):
        ...


class PandocConverter(Converter):
    def __init__(self, executable=None):
        self._executable = executable

    @property
    def executable(self):
        if self._executable is None:
            self._executable = find_pandoc()
        return self._executable

    # ── Commands ───────────────────────────────────────────

    def convert_cmd(self, options, output):
        cmd = [
            self.executable,
            "--from", input_format(),
            "--to", OUTPUT_FORMAT,
        ]
        cmd.extend(options.to_args())
        cmd.extend(["-o", output])
        return cmd

    def combine_cmd(self, inputs, options, output):
        cmd = [self.executable]
        cmd.extend(options.to_args())
        cmd.extend(["-o", output])
        cmd.extend(inputs)
        return cmd

    # ── Converter interface ────────────────────────────────

    def convert(self, content, options, output):
        """Pipe markdown into pandoc on stdin, writing `output`."""
        if not content:
            raise ConverterExecutionError(errors.NO_INPUT)
        if not output:
            raise ConverterExecutionError(errors.NO_OUTPUT)

        self._ensure_output_dir(output)
        self.exec_cmd(self.convert_cmd(options, output), input_text=content)
        return output

    def combine(self, inputs, options, output):
        """Concatenate document files with pandoc, writing `output`."""
        if not inputs:
            raise ConverterExecutionError(errors.NO_INPUT, stage="combine")
        if not output:
            raise ConverterExecutionError(errors.NO_OUTPUT, stage="combine")

        for path in inputs:
            if not os.path.isfile(path):
                raise ConverterExecutionError(errors.MISSING_INPUT, path, stage="combine")

        self._ensure_output_dir(output)
        self.exec_cmd(self.combine_cmd(inputs, options, output), stage="combine")
        return output

    # ── Execution ──────────────────────────────────────────

    def exec_cmd(self, cmd, input_text=None, stage="convert"):
        """Execute a pandoc command, mapping failures consistently."""
        logger.info("  Running: %s", shlex.join(cmd))
        try:
            data = input_text.encode("utf-8") if input_text is not None else None
            result = subprocess.run(
                cmd,
                input=data,
                stdin=None if data is not None else subprocess.DEVNULL,
                capture_output=True,
            )
        except FileNotFoundError as e:
            raise ConverterExecutionError(errors.NOT_FOUND, str(e), stage=stage) from e
        except UnicodeError as e:
            raise ConverterExecutionError(errors.BAD_ENCODING, str(e), stage=stage) from e
        except OSError as e:
            raise ConverterExecutionError(errors.IO, str(e), stage=stage) from e

        stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
        for line in stderr.splitlines():
            logger.debug("    pandoc: %s", line)

        if result.returncode != 0:
            detail = stderr or f"exit status {result.returncode}"
            raise ConverterExecutionError(errors.FAILED, detail, stage=stage)
        return result

    @staticmethod
    def _ensure_output_dir(output):
        directory = os.path.dirname(output)
        if not directory:
            return
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise ConverterExecutionError(errors.IO, str(e)) from e
