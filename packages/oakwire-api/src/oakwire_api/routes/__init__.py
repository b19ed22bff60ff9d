from fastapi import APIRouter, Depends
from oakwire_api.dependencies import verify_api_key
from oakwire_api.routes import health, wires

health_router = health.router

router = APIRouter(prefix="/api", dependencies=[Depends(verify_api_key)])

router.include_router(wires.router)
