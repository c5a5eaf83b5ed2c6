"""Progress reporting functionality."""

from datetime import datetime
from typing import Optional
import logging

from tqdm import tqdm

from .config import ENABLE_PROGRESS

class ProgressReporter:
    """Reports progress while a batch of stylesheets is formatted."""
    
    def __init__(self, total_steps: int, enabled: bool = ENABLE_PROGRESS):
        """Initialize the progress reporter.
        
        Args:
            total_steps: Total number of files in the batch
            enabled: Whether to draw a progress bar
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.enabled = enabled
        self.start_time = datetime.now()
        self._progress_bar: Optional[tqdm] = None
        
    def start(self):
        """Start the progress reporting."""
        self.start_time = datetime.now()
        self.current_step = 0
        if self.enabled:
            self._progress_bar = tqdm(
                total=self.total_steps,
                desc="Formatting",
                unit="file",
                bar_format='{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]',
                colour='green'
            )
        
    def update(self, step_name: str, message: str = ""):
        """Advance by one file.
        
        Args:
            step_name: Name of the file just processed
            message: Optional status message
        """
        self.current_step += 1
        if self._progress_bar:
            self._progress_bar.update(1)
            self._progress_bar.set_description(f"{step_name}: {message}" if message else step_name)
        logging.debug(f"[{self.current_step}/{self.total_steps}] {step_name} {message}".rstrip())
            
    def finish(self):
        """Finish the progress reporting."""
        self.current_step = self.total_steps
        if self._progress_bar:
            self._progress_bar.close()
            self._progress_bar = None
            
    def error(self, error_message: str):
        """Report an error.
        
        Args:
            error_message: The error message to record
        """
        if self._progress_bar:
            self._progress_bar.write(f"Error: {error_message}")
        logging.error(error_message)

    @property
    def elapsed_seconds(self) -> float:
        return (datetime.now() - self.start_time).total_seconds()
