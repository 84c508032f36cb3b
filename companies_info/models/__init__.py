"""
Modèles SQLAlchemy / SQLAlchemy models.
Importer tous les modèles ici pour que create_all les détecte.
Import all models here so create_all can detect them.
"""

from companies_info.models.country import Country
from companies_info.models.company import Company
from companies_info.models.contact import Contact

__all__ = [
    "Country",
    "Company",
    "Contact",
]
