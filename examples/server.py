# server.py

import asyncio
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import StreamingResponse

app = FastAPI()

@app.post("/session")
async def session_line(request: Request):
    """
    Answer a submitted line with a few streamed lines, so the client's
    transcript fills up fast enough to try scrolling.
    """
    body = await request.json()
    line = body.get('line', '')
    print(f"Received: {line}")

    async def lines():
        for i in range(1, 11):
            yield f"[{i:02d}] {line}\n"
            await asyncio.sleep(0.05)

    return StreamingResponse(lines(), media_type="text/plain")

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=8000)
