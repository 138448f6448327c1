from siloft_data.infrastructure.paths.platform_resolver import PlatformPathResolver

__all__ = ["PlatformPathResolver"]
