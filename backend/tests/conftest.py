"""Pytest fixtures for sheet extraction tests.

Provides:
- FakeInferenceProvider: StructuredInferencePort double returning canned text
- Sample spreadsheet exports (standard and summary layouts)
- Sample extracted order payloads

Usage:
    @pytest.mark.asyncio
    async def test_something(fake_provider_factory):
        provider = fake_provider_factory(text='{"items": []}')
        extractor = SheetOrderExtractor(provider)
"""

import sys
from pathlib import Path
from typing import Any, Optional

import pytest

# Make the package importable without an install
backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from sheetorders.domain.ai.ports import InferenceResult, StructuredInferencePort


class FakeInferenceProvider(StructuredInferencePort):
    """Returns a fixed response text (or raises a fixed error) and records calls."""

    provider_name = "fake"

    def __init__(self, text: str = "", error: Optional[BaseException] = None):
        self.text = text
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate_structured(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: dict[str, Any],
    ) -> InferenceResult:
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "response_schema": response_schema,
        })
        if self.error is not None:
            raise self.error
        return InferenceResult(
            text=self.text,
            provider=self.provider_name,
            model="fake-model",
            tokens_in=100,
            tokens_out=20,
            latency_ms=5,
        )


@pytest.fixture
def fake_provider_factory():
    """Factory for FakeInferenceProvider instances."""
    return FakeInferenceProvider


@pytest.fixture
def standard_sheet_csv() -> str:
    """Standard order sheet: vertical item list with title and delivery date."""
    return (
        "15468 - BHX_DNA_TKH - 8 Thái Thị Bôi,,\n"
        "Ngày giao hàng,31/07/2025,\n"
        "STT,Tên thiết bị,SL\n"
        "1,Máy POS,2\n"
        "2,Máy in hóa đơn,1\n"
        ",,\n"
        "Người nhận,26178 - Nguyễn Tấn Anh / SĐT: 0825979194,\n"
        "Địa chỉ,8 Thái Thị Bôi Đà Nẵng,\n"
    )


@pytest.fixture
def summary_sheet_csv() -> str:
    """Summary sheet: device names in the header, totals in the grand-total row."""
    return (
        "Cửa hàng,Máy POS,Máy in hóa đơn,Máy quét mã vạch\n"
        "BHX 1,1,1,0\n"
        "BHX 2,1,0,2\n"
        "Tổng Cộng,2,1,2\n"
        ",,,\n"
        "Người nhận,26178 - Nguyễn Tấn Anh / SĐT: 0825979194,,\n"
        "Địa chỉ,8 Thái Thị Bôi Đà Nẵng,,\n"
    )


@pytest.fixture
def empty_order_payload() -> dict:
    return {
        "orderTitle": "",
        "items": [],
        "deliveryDate": "",
        "shippingInfo": {"recipient": "", "address": ""},
    }


@pytest.fixture
def standard_order_payload() -> dict:
    return {
        "orderTitle": "15468 - BHX_DNA_TKH - 8 Thái Thị Bôi",
        "items": [
            {"name": "Máy POS", "quantity": 2},
            {"name": "Máy in hóa đơn", "quantity": 1},
        ],
        "deliveryDate": "31/07/2025",
        "shippingInfo": {
            "recipient": "26178 - Nguyễn Tấn Anh / SĐT: 0825979194",
            "address": "8 Thái Thị Bôi Đà Nẵng",
        },
    }
