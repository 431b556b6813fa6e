"""
Output file writer.
Replaces each generated document in full on every build.
"""

from pathlib import Path

from ..utils import get_logger


class DocumentWriter:
    """
    Writes generated documents into an output directory.

    Writes are plain overwrites with no locking; two writers racing on
    the same file leave whichever finished last.
    """

    def __init__(self, output_dir: str = "."):
        self.output_dir = Path(output_dir)
        self.logger = get_logger()

    def path_for(self, filename: str) -> Path:
        """Get the destination path of a document."""
        return self.output_dir / filename

    def write(self, filename: str, content: str) -> Path:
        """
        Write a document, replacing any existing content.

        Args:
            filename: Name of the file inside the output directory
            content: Full document text

        Returns:
            Path that was written
        """
        path = self.path_for(filename)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            self.logger.error(f"Error writing output file {path}: {e}")
            raise

        self.logger.info(f"Wrote {path}")
        return path

