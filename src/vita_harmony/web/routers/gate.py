"""Gate check route."""

from fastapi import APIRouter

from ...config import get_settings
from ...services.gate import check_gate

router = APIRouter(prefix="/gate", tags=["gate"])


@router.get("")
async def get_gate():
    """Run the gate check and report the display mode."""
    result = await check_gate(get_settings())
    return result.to_dict()
