"""Single-endpoint Flask app deployed to K3s via Argo CD."""

__version__ = "1.0.0"
