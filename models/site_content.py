SITE_CONTENT_FIELDS = ("heroTitle", "heroSubtitle", "aboutText", "contactInfo")

DEFAULT_SITE_CONTENT = {
    "heroTitle": "Welcome to Our Website",
    "heroSubtitle": "Discover amazing products and services",
    "aboutText": "We are a company dedicated to providing the best services to our customers.",
    "contactInfo": "Contact us at info@example.com",
}
