"""FastAPI dependency injection — wires adapters into use cases.

All long-lived components (store, cache, resolver) are built once per
application by ``build_services`` and kept on ``app.state`` so separate
app instances never share a cache.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.ext.asyncio import AsyncEngine

from topic_picker.adapters.memory.store import InMemoryAssignmentStore
from topic_picker.adapters.sheets.apps_script_store import AppsScriptAssignmentStore
from topic_picker.application.ports.assignment_store import AssignmentStore
from topic_picker.application.services.assignment_cache import AssignmentCache
from topic_picker.application.services.duplicate_resolver import DuplicateResolver
from topic_picker.application.use_cases.admin_dashboard import AdminDashboardUseCase
from topic_picker.application.use_cases.assign_topic import AssignTopicUseCase
from topic_picker.config import Settings
from topic_picker.domain.value_objects.enums import StoreBackend

logger = logging.getLogger(__name__)

_basic = HTTPBasic(realm="Topic Picker Admin")


@dataclass
class Services:
    settings: Settings
    store: AssignmentStore
    cache: AssignmentCache
    resolver: DuplicateResolver
    engine: AsyncEngine | None = None


def build_store(cfg: Settings) -> tuple[AssignmentStore, AsyncEngine | None]:
    if cfg.store_backend == StoreBackend.SQL:
        from topic_picker.adapters.persistence.database import make_engine, make_session_factory
        from topic_picker.adapters.persistence.store import SqlAssignmentStore

        engine = make_engine(cfg.database_url, timeout=cfg.store_timeout_seconds)
        logger.info("Using SQL assignment store")
        store = SqlAssignmentStore(make_session_factory(engine), timeout=cfg.store_timeout_seconds)
        return store, engine

    if cfg.store_backend == StoreBackend.MEMORY:
        logger.warning("Using in-memory assignment store; data is lost on restart")
        return InMemoryAssignmentStore(), None

    if not cfg.sheets_api_url:
        raise RuntimeError("SHEETS_API_URL must be set for the apps_script store backend")
    logger.info("Using spreadsheet assignment store at %s", cfg.sheets_api_url)
    return (
        AppsScriptAssignmentStore(cfg.sheets_api_url, timeout=cfg.store_timeout_seconds),
        None,
    )


def build_services(cfg: Settings, store: AssignmentStore | None = None) -> Services:
    engine = None
    if store is None:
        store, engine = build_store(cfg)
    cache = AssignmentCache(store, cooldown_seconds=cfg.cache_cooldown_seconds)
    return Services(
        settings=cfg,
        store=store,
        cache=cache,
        resolver=DuplicateResolver(cache, store),
        engine=engine,
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_cache(services: Services = Depends(get_services)) -> AssignmentCache:
    return services.cache


def get_resolver(services: Services = Depends(get_services)) -> DuplicateResolver:
    return services.resolver


def get_assign_topic_uc(services: Services = Depends(get_services)) -> AssignTopicUseCase:
    return AssignTopicUseCase(
        store=services.store,
        cache=services.cache,
        resolver=services.resolver,
    )


def get_admin_uc(services: Services = Depends(get_services)) -> AdminDashboardUseCase:
    return AdminDashboardUseCase(store=services.store, cache=services.cache)


def require_admin(
    credentials: HTTPBasicCredentials = Depends(_basic),
    services: Services = Depends(get_services),
) -> str:
    """Single shared credential check; no sessions, no roles."""
    cfg = services.settings
    user_ok = secrets.compare_digest(credentials.username.encode(), cfg.admin_user.encode())
    password_ok = bool(cfg.admin_password) and secrets.compare_digest(
        credentials.password.encode(), cfg.admin_password.encode()
    )
    if not (user_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials. Please check your User ID and Password.",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
