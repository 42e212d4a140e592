"""Settings model for annogen - stored in .annogen/config.yaml"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from annogen.models.template import AppendConfig


class FiletypeSettings(BaseModel):
    """Template overrides for one filetype"""
    model_config = ConfigDict(extra="allow")

    annotation_convention: Optional[str] = None
    use_default_comment: Optional[bool] = None
    append: Optional[AppendConfig] = None

    # Registry conventions to attach besides the default one
    conventions: List[str] = Field(default_factory=list)

    # Comment token prepended when use_default_comment is set
    comment: Optional[str] = None

    def template_overrides(self) -> Dict[str, Any]:
        """Overrides to feed into TemplateConfig.configure()"""
        return self.model_dump(exclude={"conventions", "comment"}, exclude_none=True)


class Settings(BaseModel):
    """Complete settings file"""
    version: str = "1.0"
    filetypes: Dict[str, FiletypeSettings] = Field(default_factory=dict)

    # filetype -> convention name -> raw rules
    custom_conventions: Dict[str, Dict[str, List[Any]]] = Field(default_factory=dict)

    def comment_for(self, filetype: str) -> Optional[str]:
        """Default comment token configured for a filetype"""
        ft = self.filetypes.get(filetype)
        return ft.comment if ft else None
