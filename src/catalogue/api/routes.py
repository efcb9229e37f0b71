"""FastAPI routes for the Catalogue domain: browsing, selling and moderation."""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from catalogue.api.schemas import CraftResponse
from catalogue.craft.craft import Craft, CraftStatus
from catalogue.craft.moderation import ApproveCraft, RejectCraft
from catalogue.craft.submission import SubmitCraft, validate_listing
from identity.user.directory import Principal
from shared.auth import require_admin, require_user
from shared.storage import FileStorage, get_storage

craft_router = APIRouter(prefix="/crafts", tags=["crafts"])


@craft_router.get("/approved")
async def list_approved() -> list[dict]:
    crafts = current_domain.repository_for(Craft).with_status(CraftStatus.APPROVED.value)
    return [craft.to_document() for craft in crafts]


@craft_router.get("/pending", dependencies=[Depends(require_admin)])
async def list_pending() -> list[dict]:
    crafts = current_domain.repository_for(Craft).with_status(CraftStatus.PENDING.value)
    return [craft.to_document() for craft in crafts]


@craft_router.post("/sell", status_code=201, response_model=CraftResponse)
async def sell_craft(
    principal: Principal = Depends(require_user),
    storage: FileStorage = Depends(get_storage),
    seller_full_name: str | None = Form(None, alias="sellerFullName"),
    seller_email: str | None = Form(None, alias="sellerEmail"),
    seller_phone: str | None = Form(None, alias="sellerPhone"),
    item_name: str | None = Form(None, alias="itemName"),
    description: str | None = Form(None),
    price: str | None = Form(None),
    region: str | None = Form(None),
    artist_name: str | None = Form(None, alias="artistName"),
    image: UploadFile | None = File(None),
) -> CraftResponse:
    if image is None or not image.filename:
        raise ValidationError({"image": ["Image is required"]})

    listing = {
        "seller_full_name": seller_full_name,
        "seller_email": seller_email,
        "seller_phone": seller_phone,
        "item_name": item_name,
        "description": description,
        "price": price,
        "region": region,
        "artist_name": artist_name,
    }
    # Reject bad listings before anything is written to storage
    validate_listing(listing)

    image_url = storage.save(image.filename, await image.read())

    command = SubmitCraft(seller_id=principal.id, image_url=image_url, **listing)
    craft_id = current_domain.process(command, asynchronous=False)
    craft = current_domain.repository_for(Craft).get(craft_id)
    return CraftResponse(message="Craft submitted successfully", craft=craft.to_document())


@craft_router.put("/approve/{craft_id}", response_model=CraftResponse, dependencies=[Depends(require_admin)])
async def approve_craft(craft_id: str) -> CraftResponse:
    current_domain.process(ApproveCraft(craft_id=craft_id), asynchronous=False)
    craft = current_domain.repository_for(Craft).get(craft_id)
    return CraftResponse(message="Craft approved successfully", craft=craft.to_document())


@craft_router.put("/reject/{craft_id}", response_model=CraftResponse, dependencies=[Depends(require_admin)])
async def reject_craft(craft_id: str) -> CraftResponse:
    current_domain.process(RejectCraft(craft_id=craft_id), asynchronous=False)
    craft = current_domain.repository_for(Craft).get(craft_id)
    return CraftResponse(message="Craft rejected", craft=craft.to_document())
