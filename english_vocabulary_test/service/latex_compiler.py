import subprocess
from pathlib import Path

from loguru import logger

from english_vocabulary_test.error import ExamCompilationError


class LatexCompiler:
    def __init__(self, latexmk_command: str = "latexmk") -> None:
        self.latexmk_command = latexmk_command

    def compile(self, tex_file: Path) -> Path:
        """
        Run latexmk on ``tex_file`` inside its own directory and clean up the
        auxiliary files afterwards.

        Returns:
            Path: The produced PDF file
        """
        tex_file = tex_file.resolve()
        logger.info(f"Compiling {tex_file} with {self.latexmk_command}")
        self._run([self.latexmk_command, tex_file.name], tex_file.parent)
        self._run([self.latexmk_command, "-c", tex_file.name], tex_file.parent)

        pdf_file = tex_file.with_suffix(".pdf")
        logger.info(f"PDF created: {pdf_file}")
        return pdf_file

    @staticmethod
    def _run(command: list[str], work_dir: Path) -> None:
        logger.debug(f"Running {' '.join(command)} in {work_dir}")
        try:
            result = subprocess.run(
                command, cwd=work_dir, capture_output=True, text=True, check=False
            )
        except OSError as e:
            raise ExamCompilationError(f"failed to execute {command[0]}: {e}") from e

        if result.stdout:
            logger.debug(result.stdout)
        if result.stderr:
            logger.debug(result.stderr)
        if result.returncode != 0:
            raise ExamCompilationError(
                f"{' '.join(command)} exited with status {result.returncode}"
            )
