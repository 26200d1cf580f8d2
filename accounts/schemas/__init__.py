from accounts.schemas.base_schema import SBase
from accounts.schemas.user_schemas import SUserRegister, SUserAuth, SUserUpdate, SUser
from accounts.schemas.organization_schemas import SOrganization, SUserWithOrganizations
