"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.fields import String

from marketplace.domain import marketplace


@marketplace.value_object
class EmailAddress:
    """A syntactically valid email address.

    Checks structure only: one @, non-empty local and domain parts, a dotted
    domain, no whitespace and no consecutive dots.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address

        if any(ch.isspace() for ch in email):
            raise ValueError(f"Invalid email address: {email!r}")

        if email.count("@") != 1:
            raise ValueError(f"Invalid email address: {email!r}")

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValueError(f"Invalid email address: {email!r}")

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValueError(f"Invalid email address: {email!r}")

        if "." not in domain_part:
            raise ValueError(f"Invalid email address: {email!r}")

        if ".." in local_part or ".." in domain_part:
            raise ValueError(f"Invalid email address: {email!r}")

        for forbidden in (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\"):
            if forbidden in email:
                raise ValueError(f"Invalid email address: {email!r}")

    @classmethod
    def normalized(cls, address):
        """Validate and lower-case an address, returning the plain string."""
        return cls(address=address.strip().lower()).address
