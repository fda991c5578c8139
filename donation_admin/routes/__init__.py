from .auth import auth_bp
from .beneficiaries import beneficiaries_bp
from .campaigns import campaigns_bp
from .dashboard import dashboard_bp
from .donations import donations_bp
from .donors import donors_bp
from .expenses import expenses_bp
from .export import export_bp
from .health import bp as health_bp

BLUEPRINTS = [
    health_bp,
    auth_bp,
    dashboard_bp,
    expenses_bp,
    donations_bp,
    campaigns_bp,
    donors_bp,
    beneficiaries_bp,
    export_bp,
]

__all__ = [
    "BLUEPRINTS",
    "auth_bp",
    "beneficiaries_bp",
    "campaigns_bp",
    "dashboard_bp",
    "donations_bp",
    "donors_bp",
    "expenses_bp",
    "export_bp",
    "health_bp",
]
