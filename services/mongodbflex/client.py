"""
services/mongodbflex/client.py - MongoDB Flex API 클라이언트
"""

from __future__ import annotations

from services.flex import FlexClient


class MongoDBFlexClient(FlexClient):
    """STACKIT MongoDB Flex API 클라이언트

    reset 응답은 사용자 객체 자체입니다.
    """

    service = "mongodbflex"
