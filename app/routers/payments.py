from fastapi import APIRouter, Depends, Request

from payment_service import PaymentService
from schemas import PaymentCollection, PaymentDto

router = APIRouter(tags=["payments"])


def get_payment_service(request: Request) -> PaymentService:
    return request.app.state.payment_service


# Collection routes answer on the base path with and without a trailing slash.
@router.get("", response_model=PaymentCollection)
@router.get("/", response_model=PaymentCollection, include_in_schema=False)
async def find_all(service: PaymentService = Depends(get_payment_service)):
    return PaymentCollection(collection=await service.find_all())


@router.get("/{payment_id}", response_model=PaymentDto)
async def find_by_id(
    payment_id: int, service: PaymentService = Depends(get_payment_service)
):
    return await service.find_by_id(payment_id)


@router.post("", response_model=PaymentDto)
@router.post("/", response_model=PaymentDto, include_in_schema=False)
async def save(
    payment_dto: PaymentDto, service: PaymentService = Depends(get_payment_service)
):
    return await service.save(payment_dto)


@router.put("", response_model=PaymentDto)
@router.put("/", response_model=PaymentDto, include_in_schema=False)
async def update(
    payment_dto: PaymentDto, service: PaymentService = Depends(get_payment_service)
):
    return await service.update(payment_dto)


@router.delete("/{payment_id}", response_model=bool)
async def delete_by_id(
    payment_id: int, service: PaymentService = Depends(get_payment_service)
):
    await service.delete_by_id(payment_id)
    return True
