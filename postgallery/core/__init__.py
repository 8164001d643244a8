from postgallery.core.context import CoreContext

__all__ = ["CoreContext"]
