CUSTOMER_NOT_FOUND = "User yang dipilih tidak ditemukan."
NO_ACTIVE_CYCLE = "User yang dipilih tidak memiliki pencatatan."
SETTLEMENT_CONFLICT = "Utang sudah dilunasi oleh pembayaran lain."
