from django.urls import register_converter


class SignedIntConverter:
    """Path converter for integers that may be negative (Solar years)."""

    regex = r"-?\d+"

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(value)


register_converter(SignedIntConverter, "sint")
