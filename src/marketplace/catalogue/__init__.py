"""Catalogue bounded context."""

# Domain.init() only traverses one folder below domain.py, so the modules
# that register domain elements are imported here to be loaded by init().
import marketplace.catalogue.category.category  # noqa: F401
import marketplace.catalogue.category.events  # noqa: F401
import marketplace.catalogue.category.management  # noqa: F401
import marketplace.catalogue.category.repository  # noqa: F401
import marketplace.catalogue.product.creation  # noqa: F401
import marketplace.catalogue.product.events  # noqa: F401
import marketplace.catalogue.product.product  # noqa: F401
import marketplace.catalogue.product.repository  # noqa: F401
