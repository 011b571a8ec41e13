"""Run the dues service with ``python -m cuotas``."""

import uvicorn

from cuotas.core.config import settings

if __name__ == "__main__":
    uvicorn.run("cuotas.main:app", host="0.0.0.0", port=settings.PORT)
