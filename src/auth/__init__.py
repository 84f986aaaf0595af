from auth.refresh_tokens import RefreshTokenCache, build_refresh_token_cache, build_sweeper

__all__ = ["RefreshTokenCache", "build_refresh_token_cache", "build_sweeper"]
