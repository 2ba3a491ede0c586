"""Package tooling for the noname circuit language: manifests, dependencies, inputs and spans."""

__version__ = "0.1.0"