from accounts.models.user_model import Account
