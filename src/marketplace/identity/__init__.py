"""Identity bounded context."""

# Domain.init() only traverses one folder below domain.py, so the modules
# that register domain elements are imported here to be loaded by init().
import marketplace.identity.account.account  # noqa: F401
import marketplace.identity.account.authentication  # noqa: F401
import marketplace.identity.account.events  # noqa: F401
import marketplace.identity.account.registration  # noqa: F401
import marketplace.identity.account.repository  # noqa: F401
import marketplace.identity.shared.email  # noqa: F401
