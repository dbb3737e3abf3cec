"""GET /v1/instruments - Investment catalog"""

from typing import List

from fastapi import APIRouter, HTTPException

from bdinvest_advisor.api.v1.schemas import InstrumentSchema
from bdinvest_advisor.domain.catalog import all_instruments, get_instrument
from bdinvest_advisor.domain.exceptions import UnknownInstrumentError

router = APIRouter()


@router.get("/instruments", response_model=List[InstrumentSchema])
def list_instruments():
    """Return every instrument in catalog order"""
    return [InstrumentSchema.model_validate(inst) for inst in all_instruments()]


@router.get("/instruments/{investment_type}", response_model=InstrumentSchema)
def get_instrument_details(investment_type: str):
    """Return a single instrument, 404 when the type is not listed"""
    try:
        instrument = get_instrument(investment_type)
    except UnknownInstrumentError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return InstrumentSchema.model_validate(instrument)
