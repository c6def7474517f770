from typing import Optional
from fastapi import APIRouter, Body, Depends, status
from ...schemas import ModulePayload
from ...services import ModuleService
from ..dependencies import get_module_service
from ..responses import success_response

router = APIRouter(prefix="/modules", tags=["modules"])


@router.get("")
def list_modules(module_service: ModuleService = Depends(get_module_service)):
    """List all modules, newest first"""
    modules = module_service.list_modules()
    return success_response(data=[module.to_wire() for module in modules])


@router.post("")
def create_module(
    module_data: Optional[ModulePayload] = Body(None),
    module_service: ModuleService = Depends(get_module_service)
):
    """Create a new module"""
    module = module_service.create_module(module_data)
    return success_response(data=module.to_wire(), status_code=status.HTTP_201_CREATED)


@router.get("/{module_id}")
def get_module(
    module_id: str,
    module_service: ModuleService = Depends(get_module_service)
):
    """Get a specific module"""
    module = module_service.get_module(module_id)
    return success_response(data=module.to_wire())


@router.put("/{module_id}")
def update_module(
    module_id: str,
    module_data: Optional[ModulePayload] = Body(None),
    module_service: ModuleService = Depends(get_module_service)
):
    """Replace the content of a module"""
    module = module_service.update_module(module_id, module_data)
    return success_response(data=module.to_wire())


@router.delete("/{module_id}")
def delete_module(
    module_id: str,
    module_service: ModuleService = Depends(get_module_service)
):
    """Delete a module"""
    module_service.delete_module(module_id)
    return success_response(message="Module deleted successfully")
