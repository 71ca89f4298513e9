from __future__ import annotations

from fastapi import Request

from gateway.gateway import AdviceGateway


def get_gateway(request: Request) -> AdviceGateway:
    return request.app.state.gateway
