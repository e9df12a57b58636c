"""
Scan service for the OSA scan client.

Service layer behind the CLI commands: resolves configuration, drives the
ScanClient and turns client errors into console messages and exit codes.
"""
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Tuple

import backoff

from osaclient.client.models import (
    AuthenticationCredentials,
    OpenSourceSummary,
    OSAConfig,
    ScanHandle,
    ScanOutcome,
    ScanSubmission,
)
from osaclient.client.scan_client import ScanClient
from osaclient.core.config_manager import ConfigManager
from osaclient.core.logging_config import configure_logging
from osaclient.rich_utils.ui_helpers import get_console, summary_table
from osaclient.utils.exceptions import (
    AuthenticationError,
    ConfigurationError,
    InvalidScanStatusError,
    OSAClientError,
    ScanCancelledError,
    ScanFailedError,
    ScanTimeoutError,
    ServiceConnectionError,
    ServiceError,
    ValidationError,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CANCELLED = 130


class ScanService:
    """Runs scan, summary and status operations for the CLI."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self.config_manager = config_manager or ConfigManager()
        self.console = get_console()
        self.logger = logging.getLogger(self.__class__.__name__)

    def prepare(
        self,
        config_path: Optional[str] = None,
        server_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        poll_interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        origin: Optional[int] = None,
        verbose: bool = False,
    ) -> Tuple[OSAConfig, AuthenticationCredentials]:
        """Load configuration and credentials; CLI values override everything else."""
        config = self.config_manager.discover_and_load_config(config_path)

        logging_config = config.get("logging", {}) or {}
        configure_logging(
            level="DEBUG" if verbose else logging_config.get("level", "WARNING"),
            log_file=logging_config.get("file"),
        )
        if verbose:
            self.console.print("🔧 OSA environment:", style="dim")
            self.console.print_json(data=self.config_manager.detector.get_environment_summary())

        client_config = self.config_manager.build_client_config(
            config,
            server_url=server_url,
            poll_interval=poll_interval,
            max_attempts=max_attempts,
            origin=origin,
        )
        credentials = self.config_manager.resolve_credentials(username, password)
        return client_config, credentials

    def execute_scan(
        self,
        project_id: str,
        archive_path: str,
        wait: bool = True,
        json_output: bool = False,
        **options,
    ) -> int:
        """Submit an archive, optionally wait for it and print the summary."""
        try:
            client_config, credentials = self.prepare(**options)
            submission = ScanSubmission(
                project_id=project_id,
                archive_path=archive_path,
                origin=client_config.origin,
            )

            with ScanClient(client_config, credentials) as client:
                self.console.print(f"🚀 Submitting {archive_path} for project {project_id}...", style="cyan")
                handle = client.create_scan(submission)
                self.console.print(f"✅ Scan created: {handle.uri}", style="green")

                if not wait:
                    return EXIT_OK

                outcome = self.wait_in_background(client, handle)
                self.console.print(
                    f"✅ Scan finished after {outcome.attempts} status checks",
                    style="green"
                )

                summary = self.fetch_summary(client, project_id, client_config.summary_retries)
                self.display_summary(summary, json_output)

            return EXIT_OK

        except ScanCancelledError:
            self.console.print("⏹️  Waiting for scan cancelled", style="yellow")
            return EXIT_CANCELLED
        except OSAClientError as e:
            return self.report_error(e)

    def execute_summary(self, project_id: str, json_output: bool = False, **options) -> int:
        """Fetch and print the open-source summary of a project."""
        try:
            client_config, credentials = self.prepare(**options)
            with ScanClient(client_config, credentials) as client:
                summary = self.fetch_summary(client, project_id, client_config.summary_retries)
            self.display_summary(summary, json_output)
            return EXIT_OK
        except OSAClientError as e:
            return self.report_error(e)

    def execute_status(self, scan_link: str, **options) -> int:
        """Query a scan once and print its status."""
        try:
            client_config, credentials = self.prepare(**options)
            with ScanClient(client_config, credentials) as client:
                status_response = client.get_scan_status(ScanHandle(uri=scan_link))

            self.console.print(f"📊 Scan status: {status_response.status.name}", style="bold")
            if status_response.message:
                self.console.print(f"   {status_response.message}", style="dim")
            return EXIT_OK
        except OSAClientError as e:
            return self.report_error(e)

    def wait_in_background(self, client: ScanClient, handle: ScanHandle) -> ScanOutcome:
        """
        Poll on a worker thread so Ctrl-C in the main thread can cancel the wait.
        """
        cancel_event = threading.Event()
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(client.wait_for_scan_to_finish, handle, cancel_event)
            with self.console.status("⏳ Waiting for scan to finish..."):
                try:
                    return future.result()
                except KeyboardInterrupt:
                    cancel_event.set()
                    return future.result()

    def fetch_summary(self, client: ScanClient, project_id: str, retries: int) -> OpenSourceSummary:
        """Retry summary retrieval on connectivity failures only."""
        @backoff.on_exception(
            backoff.expo,
            ServiceConnectionError,
            max_tries=max(1, retries),
            max_value=30,
            logger=self.logger,
        )
        def get_summary():
            return client.get_open_source_summary(project_id)

        return get_summary()

    def display_summary(self, summary: OpenSourceSummary, json_output: bool = False) -> None:
        if json_output:
            self.console.print_json(data=summary.raw)
            return
        self.console.print(summary_table(summary.counters()))

    def report_error(self, error: OSAClientError) -> int:
        """Print a categorized error message and return the exit code."""
        if isinstance(error, ConfigurationError):
            self.console.print(f"⚙️  Configuration error: {error.message}", style="red")
            if error.missing_vars:
                self.console.print(f"   Set: {', '.join(error.missing_vars)}", style="dim")
        elif isinstance(error, ValidationError):
            self.console.print(f"📁 Archive validation failed: {error.message}", style="red")
        elif isinstance(error, AuthenticationError):
            self.console.print(f"🔐 Authentication failed: {error.message}", style="red")
        elif isinstance(error, ServiceConnectionError):
            self.console.print(f"🌐 Connection failed: {error}", style="red")
        elif isinstance(error, ScanFailedError):
            self.console.print(f"❌ Scan failed: {error.message}", style="red")
        elif isinstance(error, (InvalidScanStatusError, ScanTimeoutError)):
            self.console.print(f"⚠️  {error.message}", style="red")
        elif isinstance(error, ServiceError):
            self.console.print(f"💥 OSA server error: {error.message}", style="red")
        else:
            self.console.print(f"💥 {error}", style="red")

        self.logger.debug("Operation failed", exc_info=error)
        return EXIT_FAILURE
