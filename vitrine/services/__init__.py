"""
Módulo de serviços - sessão, listagem e operações do anunciante.
"""

from vitrine.services.session import SessionManager
from vitrine.services.listings import ListingQuery, ListingService
from vitrine.services.tracking import ContactTracker
from vitrine.services.catalog import CatalogService
from vitrine.services.profile import PhotoManager, ProfileService
from vitrine.services.plans import PlanService
from vitrine.services.dashboard import DashboardService
from vitrine.services.admin import ModerationService

__all__ = [
    "SessionManager",
    "ListingQuery",
    "ListingService",
    "ContactTracker",
    "CatalogService",
    "PhotoManager",
    "ProfileService",
    "PlanService",
    "DashboardService",
    "ModerationService",
]
