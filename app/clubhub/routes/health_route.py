from datetime import datetime, timezone

from clubhub.dispatcher import RouteTable

router = RouteTable()


@router.route("GET", "/health")
async def health(ctx):
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if ctx.store.is_connected() else "disconnected",
    }


__all__ = ["router"]
