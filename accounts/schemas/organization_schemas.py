from typing import Iterable, List, Optional, TYPE_CHECKING

from pydantic import Field

from accounts.schemas.base_schema import SBase

if TYPE_CHECKING:
    from accounts.models import Account


class SOrganization(SBase):
    org_id: int = Field(..., alias="OrgID", description="ID организации")
    org_title: str = Field(..., alias="OrgTitle", description="Название организации")


class SUserWithOrganizations(SBase):
    id: Optional[int] = None
    # email нужен вызывающему коду, но в ответ не попадает
    email: str = Field("", exclude=True)
    first_name: str
    last_name: str
    orgs: List[SOrganization] = Field(default_factory=list)

    @classmethod
    def from_account(
        cls, account: "Account", orgs: Iterable[SOrganization] = ()
    ) -> "SUserWithOrganizations":
        """Собрать пользователя вместе с организациями, порядок сохраняется."""
        return cls(
            id=account.id,
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            orgs=list(orgs),
        )
