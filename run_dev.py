# run_dev.py
"""
Local development launcher for the relay API.
Equivalent to: `uvicorn src.app:app --reload --host 0.0.0.0 --port 3001`
"""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "src.app:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
