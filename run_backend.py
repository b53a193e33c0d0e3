#!/usr/bin/env python3
"""Start the EZ Ladder Configurator API server."""

import uvicorn

from configurator.api.settings import AppSettings

if __name__ == "__main__":
    settings = AppSettings()
    uvicorn.run(
        "configurator.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        reload_dirs=["configurator"],
    )
