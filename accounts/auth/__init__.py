from accounts.auth.hash_password import HashPassword
