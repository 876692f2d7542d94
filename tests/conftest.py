from taskhub.config import ApplicationConfig

# Cheapest bcrypt cost so the suite stays fast
ApplicationConfig.BCRYPT_ROUNDS = 4
