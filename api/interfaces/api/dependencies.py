# api/interfaces/api/dependencies.py
from api.application.services.crop_service import CropService
from api.application.services.harvest_service import HarvestService
from api.application.services.producer_service import ProducerService
from api.application.services.property_crop_service import PropertyCropService
from api.application.services.property_service import PropertyService
from api.application.services.reporting_aggregator import ReportingAggregator
from api.infrastructure.config import get_settings
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_crop_repo import DuckDBCropRepo
from api.infrastructure.repositories.duckdb_harvest_repo import DuckDBHarvestRepo
from api.infrastructure.repositories.duckdb_producer_repo import DuckDBProducerRepo
from api.infrastructure.repositories.duckdb_property_crop_repo import DuckDBPropertyCropRepo
from api.infrastructure.repositories.duckdb_property_repo import DuckDBPropertyRepo
from api.infrastructure.repositories.duckdb_reports_store import DuckDBReportsStore


def get_producer_service() -> ProducerService:
    return ProducerService(producer_repo=DuckDBProducerRepo(get_connection()))


def get_property_service() -> PropertyService:
    conn = get_connection()
    return PropertyService(
        property_repo=DuckDBPropertyRepo(conn),
        producer_service=ProducerService(producer_repo=DuckDBProducerRepo(conn)),
    )


def get_harvest_service() -> HarvestService:
    return HarvestService(harvest_repo=DuckDBHarvestRepo(get_connection()))


def get_crop_service() -> CropService:
    return CropService(crop_repo=DuckDBCropRepo(get_connection()))


def get_property_crop_service() -> PropertyCropService:
    conn = get_connection()
    return PropertyCropService(
        property_crop_repo=DuckDBPropertyCropRepo(conn),
        property_service=PropertyService(
            property_repo=DuckDBPropertyRepo(conn),
            producer_service=ProducerService(producer_repo=DuckDBProducerRepo(conn)),
        ),
        harvest_service=HarvestService(harvest_repo=DuckDBHarvestRepo(conn)),
        crop_service=CropService(crop_repo=DuckDBCropRepo(conn)),
    )


def get_reporting_aggregator() -> ReportingAggregator:
    return ReportingAggregator(
        store=DuckDBReportsStore(get_connection()),
        max_workers=get_settings().reports_max_workers,
    )
