"""
Intercepts import errors concerning optional dependencies so that the caller is told
which geocameras extra provides them, instead of receiving a bare ModuleNotFoundError.
"""

__all__ = ['ConditionalPackageInterceptor']

from typing import Dict, Union

from geocameras.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    A meta path finder, consulted last by importlib, which raises an informative
    ModuleNotFoundError for packages that are known optional dependencies.

    To use:
        In the package's root __init__.py:

            ConditionalPackageInterceptor.permit_packages(
                {'pyproj': 'geocameras[proj]'}
            )
            sys.meta_path.append(ConditionalPackageInterceptor)

    Packages that were not registered fall through to the usual import machinery.
    """

    PERMITTED_PACKAGES: Dict[str, str] = {}

    @classmethod
    def permit_packages(cls, packages: Union[list, dict]) -> None:
        """
        Registers optional packages along with the pip requirement that installs them.

        You can register packages in two ways:
            As a list: the import name is also the requirement
                ["pyproj"]

            As a dict: import name mapped to requirement
                {"pyproj": "geocameras[proj]"}

        Args:
            packages (Union[list, dict]): The optional packages

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Invoked by importlib only once every other finder failed to locate `name`.

        Args:
            name (str): The name of the package
            path:
            target:

        Returns:
            None for packages that were not registered, otherwise raises
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        requirement = cls.PERMITTED_PACKAGES[name]
        LOGGER.debug('Optional package %s is not installed', name)
        raise ModuleNotFoundError(
            f"You are attempting to use functionality which requires an optional "
            f"installation ({name}). Install it with: \n"
            f"    pip install {requirement}",
            name=name
        )
