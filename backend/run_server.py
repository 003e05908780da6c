#!/usr/bin/env python3
"""Production server runner for the DailyVerse backend"""

import uvicorn

import settings

if __name__ == "__main__":  # pragma: no cover
    uvicorn.run(
        "app:create_app",
        factory=True,
        host="0.0.0.0",  # nosec: B104
        port=settings.PORT,
        reload=False,
        workers=2,
        log_level="info",
        proxy_headers=True,
    )
