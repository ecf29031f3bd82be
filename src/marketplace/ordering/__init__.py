"""Ordering bounded context."""

# Domain.init() only traverses one folder below domain.py, so the modules
# that register domain elements are imported here to be loaded by init().
import marketplace.ordering.cart.cart  # noqa: F401
import marketplace.ordering.cart.events  # noqa: F401
import marketplace.ordering.cart.items  # noqa: F401
import marketplace.ordering.cart.repository  # noqa: F401
import marketplace.ordering.order.events  # noqa: F401
import marketplace.ordering.order.order  # noqa: F401
import marketplace.ordering.order.placement  # noqa: F401
import marketplace.ordering.order.repository  # noqa: F401
