"""GiftCircle: shared social events, secret-friend draws and supply ledgers."""
