import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from clubhub.constant_file import CORS_ORIGINS, LOG_LEVEL
from clubhub.database import Store, store as default_store
from clubhub.dispatcher import Dispatcher, RouteTable

from clubhub.routes.auth_route import router as AuthRouter
from clubhub.routes.event_route import router as EventRouter
from clubhub.routes.payment_route import router as PaymentRouter
from clubhub.routes.member_route import router as MemberRouter
from clubhub.routes.submission_route import router as SubmissionRouter
from clubhub.routes.gallery_route import router as GalleryRouter
from clubhub.routes.testimonial_route import router as TestimonialRouter
from clubhub.routes.health_route import router as HealthRouter

# Models must be imported before the store creates tables
from clubhub.models.user_model import User
from clubhub.models.event_model import Event
from clubhub.models.registration_model import EventRegistration
from clubhub.models.payment_model import Payment
from clubhub.models.member_model import Member
from clubhub.models.gallery_model import GalleryItem
from clubhub.models.testimonial_model import Testimonial
from clubhub.models.submission_model import Submission

logger = logging.getLogger(__name__)

METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def build_routes() -> RouteTable:
    routes = RouteTable()
    for router in (AuthRouter, EventRouter, PaymentRouter, MemberRouter,
                   SubmissionRouter, GalleryRouter, TestimonialRouter, HealthRouter):
        routes.extend(router)
    return routes


def create_app(store: Store = None, cors_origins=None) -> FastAPI:
    store = store or default_store
    cors_origins = list(cors_origins or CORS_ORIGINS)
    dispatcher = Dispatcher(build_routes(), store, cors_origins=cors_origins)

    app = FastAPI(title="Club Hub API")
    app.state.store = store
    app.state.dispatcher = dispatcher

    @app.api_route("/{full_path:path}", methods=METHODS, include_in_schema=False)
    async def api_entry(request: Request, full_path: str):
        return await dispatcher.handle(request)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials="*" not in cors_origins,
        allow_methods=["POST", "GET", "OPTIONS", "DELETE", "PUT"],
        allow_headers=["*"],
    )
    return app


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app()


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
