"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, field_validator
from typing import Optional


DEFAULT_CATALOG_ITEMS = [
    "banana",
    "apple",
    "orange",
    "grape",
    "red apple",
    "kiwi",
    "mango",
    "pear",
    "cherry",
    "green apple",
]


class GrpcTlsSettings(BaseModel):
    enabled: bool = False
    cert: Optional[str] = None
    key: Optional[str] = None
    ca: Optional[str] = None


class GrpcSettings(BaseModel):
    enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 50051
    # This maps to GRPC option grpc.max_concurrent_streams
    max_concurrent_streams: int = 100
    tls: GrpcTlsSettings = Field(default_factory=GrpcTlsSettings)


class GrpcClientSettings(BaseModel):
    target: str = "localhost:50051"


class CatalogSettings(BaseModel):
    items: list[str] = Field(default_factory=lambda: list(DEFAULT_CATALOG_ITEMS))

    @field_validator("items", mode="before")
    @classmethod
    def _parse_items(cls, v):
        """允许 JSON 字符串或逗号分隔字符串两种格式。"""
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    arr = json.loads(s)
                    if isinstance(arr, list):
                        return arr
                except Exception:
                    pass
            return [item.strip() for item in s.split(",") if item.strip()]
        return v


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="Order Lookup Service")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=True)
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: Optional[str] = Field(default=None, description="覆盖默认日志级别（DEBUG 时为 DEBUG，否则 INFO）")
    LOG_JSON: Optional[bool] = Field(default=None, description="强制 JSON 渲染；默认仅非 DEBUG 环境使用 JSON")

    # gRPC settings
    grpc: GrpcSettings = Field(default_factory=GrpcSettings)
    client: GrpcClientSettings = Field(default_factory=GrpcClientSettings)

    # 商品目录（启动时固定，运行期只读）
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


settings = Settings()
