from import_organizer.models.domain_models import ImportKind


def classify(specifier: str, import_alias: str) -> ImportKind:
    if specifier.startswith(import_alias):
        return ImportKind.ALIASED
    if specifier.startswith("."):
        return ImportKind.RELATIVE
    return ImportKind.EXTERNAL
