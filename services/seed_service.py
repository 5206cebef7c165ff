"""
Seeding workflow: wipe the catalog collections and the image bucket, then
reload categories, customizations, menu items and their customization links
from the reference dataset.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple
import json
import logging
import time

import requests
from appwrite.exception import AppwriteException
from pydantic import ValidationError

from adapters.appwrite_adapter import AppwriteBackend
from app.exceptions import SeedError, WipeError, backend_details, backend_message
from domain.schemas import (
    CategoryCreate,
    CustomizationCreate,
    DeletionResult,
    MenuItem,
    MenuItemCreate,
    SeedData,
    SeedMenuItem,
    SeedReport,
)
from repositories import (
    CategoryRepository,
    CustomizationRepository,
    FileRepository,
    MenuCustomizationRepository,
    MenuRepository,
)

logger = logging.getLogger("foodorder.seed")

DEFAULT_SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "seed_data.json"
DEFAULT_IMAGE_TYPE = "image/jpeg"


def load_seed_data(path: Optional[Path] = None) -> SeedData:
    """Read and validate the reference dataset.

    Raises:
        FileNotFoundError: the file does not exist
        SeedError: the file is not valid JSON or does not match the dataset shape
    """
    path = Path(path) if path else DEFAULT_SEED_FILE
    with open(path, "r", encoding="utf-8") as fh:
        try:
            raw = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SeedError(f"Seed file {path} is not valid JSON: {exc}", code="invalid_seed_data") from exc
    try:
        return SeedData.model_validate(raw)
    except ValidationError as exc:
        raise SeedError(
            f"Seed file {path} does not match the dataset shape",
            details={"errors": [err["msg"] for err in exc.errors()]},
            code="invalid_seed_data",
        ) from exc


def _image_filename(image_url: str) -> str:
    name = image_url.split("?", 1)[0].split("/")[-1]
    return name or f"file-{int(time.time() * 1000)}.jpg"


class SeedService:
    """Destructive wipe-and-rebuild loader for the catalog"""

    def __init__(
        self,
        backend: AppwriteBackend,
        delete_workers: int = 8,
        image_fetch_timeout: float = 30.0,
        http=None,
    ):
        self.backend = backend
        self.delete_workers = delete_workers
        self.image_fetch_timeout = image_fetch_timeout
        self.http = http or requests
        self.categories = CategoryRepository(backend)
        self.customizations = CustomizationRepository(backend)
        self.menu = MenuRepository(backend)
        self.menu_customizations = MenuCustomizationRepository(backend)
        self.files = FileRepository(backend)

    # ------------------------------------------------------------------
    # Workflow
    # ------------------------------------------------------------------

    def seed(self, data: SeedData) -> SeedReport:
        """
        Run the five phases in order: wipe, categories, customizations,
        menu items (with image upload), customization links.

        Nothing is rolled back when a phase fails; re-running starts with a wipe.

        Raises:
            WipeError: some records could not be deleted
            SeedError: any other failure
        """
        report = SeedReport()
        logger.info("seed_started")
        try:
            self.wipe(report)
            category_map = self.load_categories(data, report)
            customization_map = self.load_customizations(data, report)
            created = self.load_menu(data, category_map, customization_map, report)
            self.load_links(created, customization_map, report)
        except SeedError:
            logger.exception("seed_failed")
            raise
        except AppwriteException as exc:
            logger.exception("seed_failed")
            raise SeedError(
                backend_message(exc), details=backend_details(exc), code="seed_aborted"
            ) from exc
        except ValidationError as exc:
            logger.exception("seed_failed")
            raise SeedError(
                f"Unexpected record shape: {exc}", code="seed_aborted"
            ) from exc
        except Exception as exc:
            logger.exception("seed_failed")
            raise SeedError(f"Seeding aborted: {exc!r}", code="seed_aborted") from exc

        logger.info(
            f"seed_complete categories={report.categories} "
            f"customizations={report.customizations} menu_items={report.menu_items} "
            f"links={report.menu_customizations} uploaded_images={report.uploaded_images} "
            f"image_fallbacks={len(report.image_fallbacks)}"
        )
        return report

    def wipe(self, report: Optional[SeedReport] = None) -> List[DeletionResult]:
        """Delete every document of the catalog collections and every stored file.

        All targets are processed; failures are collected and raised together.
        """
        logger.info("seed_clearing")
        results: List[DeletionResult] = []
        for repo in (
            self.categories,
            self.customizations,
            self.menu,
            self.menu_customizations,
            self.files,
        ):
            target = getattr(repo, "collection_id", None) or repo.bucket_id
            try:
                batch = repo.delete_all(self.delete_workers)
            except AppwriteException as exc:
                raise SeedError(
                    f"Could not list {target}: {backend_message(exc)}",
                    details=backend_details(exc),
                    code="wipe_list_failed",
                ) from exc
            deleted = sum(1 for r in batch if r.ok)
            if report is not None:
                report.deleted[target] = deleted
            logger.info(f"seed_cleared target={target} deleted={deleted} failed={len(batch) - deleted}")
            results.extend(batch)

        failures = [r for r in results if not r.ok]
        if failures:
            raise WipeError(
                f"{len(failures)} record(s) could not be deleted", failures=failures, code="wipe_failed"
            )
        return results

    def load_categories(self, data: SeedData, report: SeedReport) -> Dict[str, str]:
        logger.info("seed_creating_categories")
        category_map: Dict[str, str] = {}
        for cat in data.categories:
            doc = self.categories.create_category(
                CategoryCreate(name=cat.name, description=cat.description)
            )
            category_map[cat.name] = doc.id
            report.categories += 1
        return category_map

    def load_customizations(self, data: SeedData, report: SeedReport) -> Dict[str, str]:
        logger.info("seed_creating_customizations")
        customization_map: Dict[str, str] = {}
        for cus in data.customizations:
            doc = self.customizations.create_customization(
                CustomizationCreate(name=cus.name, price=cus.price, type=cus.type)
            )
            if doc.kind is None:
                logger.info(f"seed_customization_custom_type name={cus.name!r} type={doc.type!r}")
            customization_map[cus.name] = doc.id
            report.customizations += 1
        return customization_map

    def load_menu(
        self,
        data: SeedData,
        category_map: Dict[str, str],
        customization_map: Dict[str, str],
        report: SeedReport,
    ) -> List[Tuple[MenuItem, SeedMenuItem]]:
        """Create the menu item documents; returns each created item with its source entry"""
        logger.info("seed_creating_menu_items")
        created: List[Tuple[MenuItem, SeedMenuItem]] = []
        for item in data.menu:
            logger.info(f"seed_processing_menu_item name={item.name!r}")
            category_id = category_map.get(item.category_name)
            if category_id is None:
                raise SeedError(
                    f"Menu item {item.name!r} references unknown category {item.category_name!r}",
                    code="unknown_category",
                )
            unknown = [c for c in item.customizations if c not in customization_map]
            if unknown:
                raise SeedError(
                    f"Menu item {item.name!r} references unknown customizations {unknown}",
                    code="unknown_customization",
                )

            image_ref, uploaded = self.upload_image(item.image_url)
            if uploaded:
                report.uploaded_images += 1
            else:
                report.image_fallbacks.append(item.name)

            doc = self.menu.create_item(
                MenuItemCreate(
                    name=item.name,
                    description=item.description,
                    image_url=image_ref,
                    price=item.price,
                    rating=item.rating,
                    calories=item.calories,
                    protein=item.protein,
                    category_id=category_id,
                )
            )
            created.append((doc, item))
            report.menu_items += 1
        return created

    def load_links(
        self,
        created: List[Tuple[MenuItem, SeedMenuItem]],
        customization_map: Dict[str, str],
        report: SeedReport,
    ) -> None:
        logger.info("seed_linking_customizations")
        for doc, item in created:
            for cus_name in item.customizations:
                self.menu_customizations.link(doc.id, customization_map[cus_name])
                report.menu_customizations += 1

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def upload_image(self, image_url: str) -> Tuple[str, bool]:
        """Copy a remote image into the bucket.

        Returns:
            (view URL of the stored file, True), or (image_url, False) when the
            fetch or the upload failed
        """
        try:
            logger.debug(f"seed_fetching_image url={image_url}")
            response = self.http.get(image_url, timeout=self.image_fetch_timeout)
            response.raise_for_status()
            mime_type = (
                response.headers.get("Content-Type", "").split(";")[0].strip()
                or DEFAULT_IMAGE_TYPE
            )
            stored = self.files.upload(response.content, _image_filename(image_url), mime_type)
        except Exception as exc:
            logger.warning(f"seed_image_fallback url={image_url} error={exc}")
            return image_url, False

        logger.info(f"seed_image_uploaded file_id={stored.id}")
        return self.files.view_url(stored.id), True
