"""Repository helpers: async data access over companies, jobs and users."""
