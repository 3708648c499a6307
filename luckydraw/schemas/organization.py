from typing import Optional

from pydantic import BaseModel


class Organization(BaseModel):
    id: int
    name: str = ""
    logo: Optional[str] = None


class OrganizationData(BaseModel):
    """Lucky draw system of an organization, as shown on the entry form header."""

    id: int
    name: str = ""
    background_image: Optional[str] = None
    organization: Optional[Organization] = None

    @property
    def display_name(self) -> str:
        if self.organization and self.organization.name:
            return f"{self.organization.name} - {self.name}" if self.name else self.organization.name

        return self.name
