"""
Monitoring Utilities
Console metrics and process health
"""

import os
import platform
import time
from typing import Any, Dict, List


class Monitoring:
    """Counts console activity and reports process metrics."""

    def __init__(self):
        self.start_time = time.time()
        self.metrics = {
            "commandsExecuted": 0,
            "commandsNotFound": 0,
            "linesExecuted": 0,
            "errors": 0,
        }

    def attach(self, handler: Any, error_handler: Any) -> None:
        """Subscribe to a command handler's and an error handler's signals."""
        handler.command_executed += self.record_command
        handler.command_not_found += self.record_not_found
        handler.line_executed += self.record_line
        error_handler.error_handled += self.record_error

    def record_command(self, descriptor: Any = None) -> None:
        """Record command execution."""
        self.metrics["commandsExecuted"] += 1

    def record_not_found(self, name: str = "") -> None:
        """Record a lookup miss."""
        self.metrics["commandsNotFound"] += 1

    def record_line(self, line: str = "") -> None:
        """Record an executed input line."""
        self.metrics["linesExecuted"] += 1

    def record_error(self, error: Any = None, context: str = "") -> None:
        """Record error."""
        self.metrics["errors"] += 1

    def get_system_metrics(self) -> Dict[str, Any]:
        """
        Get system metrics.

        Returns:
            Dict with memory, uptime and platform info
        """
        import psutil

        process = psutil.Process()
        memory_info = process.memory_info()

        return {
            "memory": {
                "used": round(memory_info.rss / 1024 / 1024),
                "virtual": round(memory_info.vms / 1024 / 1024),
                "systemTotal": round(psutil.virtual_memory().total / 1024 / 1024),
            },
            "uptime": {
                "process": self.format_duration(int(time.time() - process.create_time())),
                "console": self.format_duration(int(time.time() - self.start_time)),
            },
            "platform": {
                "python": platform.python_version(),
                "os": f"{platform.system()} {platform.release()}",
                "pid": os.getpid(),
            },
        }

    @staticmethod
    def format_duration(seconds: int) -> str:
        """
        Format seconds as a short duration string.

        Args:
            seconds: Duration in seconds

        Returns:
            String like "1h 2m 3s"
        """
        hours, remainder = divmod(max(seconds, 0), 3600)
        minutes, secs = divmod(remainder, 60)

        parts: List[str] = []
        if hours:
            parts.append(f"{hours}h")
        if minutes:
            parts.append(f"{minutes}m")
        if secs or not parts:
            parts.append(f"{secs}s")
        return " ".join(parts)

    def format_status(self) -> str:
        """
        Format the status report shown by the status command.

        Returns:
            Console markup string
        """
        system = self.get_system_metrics()

        return "\n".join([
            "[b]Console Status[/b]",
            f"  Uptime: {system['uptime']['console']} (process {system['uptime']['process']})",
            f"  Memory: {system['memory']['used']}MB of {system['memory']['systemTotal']}MB",
            f"  Python: {system['platform']['python']} on {system['platform']['os']}",
            f"  Lines executed: {self.metrics['linesExecuted']}",
            f"  Commands executed: {self.metrics['commandsExecuted']}",
            f"  Commands not found: {self.metrics['commandsNotFound']}",
            f"  Errors: {self.metrics['errors']}",
        ])
