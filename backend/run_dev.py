#!/usr/bin/env python3
"""Development server runner for the DailyVerse backend"""

import setproctitle
import uvicorn

import settings

setproctitle.setproctitle("DailyVerse DEV API")
if __name__ == "__main__":  # pragma: no cover
    uvicorn.run(
        "app:create_app",
        factory=True,
        host="127.0.0.1",
        port=settings.PORT,
        reload=True,
        log_level="info",
    )
