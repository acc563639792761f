#!/usr/bin/env python
"""Script to run the to-do page server."""
import uvicorn

from todo_view.config import HOST, PORT

if __name__ == "__main__":
    uvicorn.run(
        "todo_view.main:app",
        host=HOST,
        port=PORT,
        reload=True
    )
