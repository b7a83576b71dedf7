"""FastAPI server exposing the environment snapshot read-only"""
import time
from typing import Any, Dict, Optional
from fastapi import FastAPI, HTTPException
from config import Settings
from environment.directories import DIRECTORY_ACCESSORS
from environment.properties import HostProperties, PropertyAccessDenied, PropertyUndefined
from environment.snapshot import EnvironmentSnapshot, get_environment_snapshot
from logging_config import get_logger, log_error


logger = get_logger(__name__)


class EnvironmentReportServer:
    """FastAPI server for the environment report"""

    def __init__(self, settings: Settings, snapshot: Optional[EnvironmentSnapshot] = None,
                 host: Optional[HostProperties] = None):
        self.settings = settings
        self.snapshot = snapshot or get_environment_snapshot(settings)
        # Directory lookups are live and read through the snapshot's host view
        self.host = host or self.snapshot.host
        self.start_time = time.time()
        self.app = FastAPI(
            title="Environment Report",
            version=settings.service_version,
            docs_url=None,
            redoc_url=None,
            openapi_url=None
        )

        self._setup_routes()

    def _setup_routes(self):
        """Setup FastAPI routes"""

        @self.app.get('/health')
        def health_check():
            """Health check endpoint"""
            return {
                "status": "healthy",
                "captured_properties": len(self.snapshot.values),
            }

        @self.app.get('/status')
        def get_status():
            """Service and platform summary"""
            return {
                "service": {
                    "name": self.settings.service_name,
                    "version": self.settings.service_version,
                    "uptime_seconds": round(time.time() - self.start_time, 1),
                    "hostname": self.snapshot.host_name,
                },
                "platform": {
                    "os_name": self.snapshot.os_name,
                    "os_version": self.snapshot.os_version,
                    "os_arch": self.snapshot.os_arch,
                    "python_version": self.snapshot.python_version,
                    "is_os_unix": self.snapshot.flags.is_os_unix,
                    "is_os_windows": self.snapshot.flags.is_os_windows,
                },
            }

        @self.app.get('/environment')
        def get_environment():
            """All captured properties; absent values are null"""
            return {"properties": self.snapshot.as_dict()}

        @self.app.get('/environment/properties/{name}')
        def get_property(name: str):
            """A single captured property"""
            if name not in self.snapshot:
                raise HTTPException(status_code=404, detail={"error": f"Unknown property: {name}"})
            captured = self.snapshot.value(name)
            return {"name": captured.name, "value": captured.value, "present": captured.present}

        @self.app.get('/environment/flags')
        def get_flags():
            """Derived classification flags"""
            return {"flags": self.snapshot.flags.as_dict()}

        @self.app.get('/environment/directories')
        def get_directories():
            """Directories resolved live from the host"""
            return {"directories": self._resolve_directories()}

    def _resolve_directories(self) -> Dict[str, Dict[str, Any]]:
        directories = {}
        for name, accessor in DIRECTORY_ACCESSORS.items():
            try:
                directories[name] = {"path": str(accessor(self.host)), "error": None}
            except (PropertyAccessDenied, PropertyUndefined) as e:
                log_error(logger, e, {"component": "directories", "property": name})
                directories[name] = {"path": None, "error": str(e)}
        return directories

    def get_app(self) -> FastAPI:
        """Get the FastAPI application"""
        return self.app
