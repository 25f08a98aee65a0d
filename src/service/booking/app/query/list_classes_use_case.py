from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_catalog_query_repo import ICatalogQueryRepo
from src.service.booking.domain.entity.class_entity import ClassOffering


class ListClassesUseCase:
    def __init__(self, *, catalog_query_repo: ICatalogQueryRepo) -> None:
        self.catalog_query_repo = catalog_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        catalog_query_repo: ICatalogQueryRepo = Depends(Provide[Container.catalog_query_repo]),
    ) -> Self:
        return cls(catalog_query_repo=catalog_query_repo)

    @Logger.io
    async def list_all(self) -> List[ClassOffering]:
        return await self.catalog_query_repo.list_classes()

    @Logger.io
    async def get_detail(self, *, class_id: int) -> ClassOffering:
        class_offering = await self.catalog_query_repo.get_class_detail(class_id=class_id)
        if not class_offering:
            raise NotFoundError('Class not found')
        return class_offering
