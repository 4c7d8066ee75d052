"""Region/language dependent vocabularies used in prompts and validation."""

DEFAULT_CATEGORIES = ["Breakfast", "Lunch", "Dinner", "Snacks", "Salad"]
FRENCH_CATEGORIES = [
    "Moins de 3€ / pers",
    "Repas Familiaux",
    "Menu Fin de Mois",
    "Spécial Étudiant",
    "Entrées & Apéros",
    "Plats Principaux",
    "Desserts Éco",
    "Boulangerie Maison",
    "Recettes Airfryer",
    "Batch Cooking",
    "Prêt en 20 min",
    "Lunchbox",
    "Cuisiner les Restes",
    "Calendrier de Saison",
    "Fait Maison (DIY)",
    "Astuces Cuisine",
]

ENGLISH_HEALTH_SITES = [
    "Healthline: https://www.healthline.com",
    "Medical News Today: https://www.medicalnewstoday.com",
    "Harvard T.H. Chan School of Public Health: https://www.hsph.harvard.edu/nutritionsource/",
    "Mayo Clinic: https://www.mayoclinic.org",
    "WebMD: https://www.webmd.com",
    "EatRight: https://www.eatright.org",
    "NIH: https://www.nih.gov",
    "USDA FoodData Central: https://fdc.nal.usda.gov",
    "Cleveland Clinic: https://health.clevelandclinic.org",
    "Verywell Fit: https://www.verywellfit.com",
]
FRENCH_HEALTH_SITES = [
    "Manger Bouger (PNNS): https://www.mangerbouger.fr",
    "Ameli (Assurance Maladie): https://www.ameli.fr",
    "Vidal (Reference Medicale): https://www.vidal.fr",
    "Doctissimo (Sante): https://www.doctissimo.fr/sante",
    "PasseportSanté: https://www.passeportsante.net",
    "Inserm: https://www.inserm.fr",
    "ANSES: https://www.anses.fr",
    "Ministère de la Santé: https://sante.gouv.fr",
    "AlloDocteurs: https://www.allodocteurs.fr",
]

DEFAULT_CATEGORY = "Dinner"


def is_french_context(region: str, language: str) -> bool:
    return region == "France" and language == "French"


def categories_for(region: str, language: str) -> list[str]:
    """Allowed recipe categories for a region/language pair."""
    return list(FRENCH_CATEGORIES if is_french_context(region, language) else DEFAULT_CATEGORIES)


def health_sites_for(region: str, language: str) -> list[str]:
    return list(FRENCH_HEALTH_SITES if is_french_context(region, language) else ENGLISH_HEALTH_SITES)


def example_health_link(region: str, language: str) -> str:
    if is_french_context(region, language):
        return "https://www.mangerbouger.fr/manger-mieux"
    return "https://www.healthline.com/nutrition/benefits-of-olive-oil"
