from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional, Dict, Any

from .session import get_session

app = FastAPI(title="Paragraph MCP REST bridge")


# Pydantic models for request/response
class CallRequest(BaseModel):
    method: str  # "tools/list" or "tools/call"
    params: Optional[Dict[str, Any]] = None


@app.get("/")
async def root():
    return {"message": "Paragraph MCP Server is running", "status": "ok"}


@app.get("/tools")
async def list_tools():
    session = get_session()
    return [
        session.tool_executor.load_tool(meta.name).to_mcp_tool()
        for meta in session.list_tools()
    ]


@app.post("/tool/{name}")
async def call_tool(name: str, arguments: Optional[Dict[str, Any]] = None):
    """Run a tool; the body is its flat parameter object, the response its envelope."""
    result = await get_session().call(name, arguments or {})
    return result.model_dump()


@app.post("/call")
async def call_mcp_post(request: CallRequest):
    """
    Generic endpoint mirroring the MCP methods
    Examples:
    - {"method": "tools/list", "params": {}}
    - {"method": "tools/call", "params": {"name": "paragraph_get_post", "arguments": {"postId": "abc"}}}
    """
    params = request.params or {}

    if request.method == "tools/list":
        return await list_tools()

    if request.method == "tools/call":
        name = params.get("name")
        if not name:
            raise HTTPException(status_code=400, detail="Tool name is required")
        return await call_tool(name, params.get("arguments"))

    raise HTTPException(status_code=400, detail=f"Unsupported method: {request.method}")
