"""Building blocks of an ECMAScript virtual machine: values, objects, realms and test tools."""

__version__ = "0.1.0"