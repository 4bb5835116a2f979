"""
Sample catalog used by the management commands.

Categories are keyed by slug; packages and plugins point at their category
through ``category_slug`` so the data does not depend on database ids.
"""

MAIN_CATEGORIES = [
    {
        "name": "Design Services",
        "slug": "design-services",
        "description": "Brand identity and print design",
    },
    {
        "name": "Website Services",
        "slug": "website-services",
        "description": "Website design and development",
    },
    {
        "name": "Website Maintenance",
        "slug": "website-maintenance",
        "description": "Updates, backups and security monitoring for live sites",
    },
    {
        "name": "Digital Marketing",
        "slug": "digital-marketing",
        "description": "Search, content and paid campaigns",
    },
    {
        "name": "Social Media Management",
        "slug": "social-media-management",
        "description": "Account management and content calendars",
    },
    {
        "name": "WordPress Plugins",
        "slug": "wordpress-plugins",
        "description": "Add-ons that extend WordPress sites",
    },
]

SUBCATEGORIES = [
    {
        "name": "Logo Design",
        "slug": "logo-design",
        "description": "Custom logos for new and growing brands",
        "parent_slug": "design-services",
    },
    {
        "name": "Letterhead Design",
        "slug": "letterhead-design",
        "description": "Branded letterheads for print and email",
        "parent_slug": "design-services",
    },
    {
        "name": "Business Card Design",
        "slug": "business-card-design",
        "description": "Print-ready business cards",
        "parent_slug": "design-services",
    },
    {
        "name": "Websites",
        "slug": "websites",
        "description": "Brochure and business websites",
        "parent_slug": "website-services",
    },
    {
        "name": "E-Commerce Websites",
        "slug": "ecommerce-websites",
        "description": "Online stores with payments and inventory",
        "parent_slug": "website-services",
    },
    {
        "name": "SEO",
        "slug": "seo",
        "description": "Search engine optimisation tools",
        "parent_slug": "wordpress-plugins",
    },
]

PACKAGES = [
    {
        "title": "Logo Design Basic",
        "subtitle": "Basic Logo Design in Dubai",
        "price": "From: 150.00 USD",
        "description": "Choose a logo design package and place the order online. "
        "We will email you the logo design within the time frame you choose.",
        "features": ["2 Initial Concepts", "2 Revision Rounds", "Vector Files"],
        "category_slug": "logo-design",
        "featured": True,
    },
    {
        "title": "Professional Logo Design",
        "subtitle": "Premium brand identity",
        "price": "From: 350.00 USD",
        "description": "Five concepts, unlimited revisions and a brand style guide.",
        "features": ["5 Initial Concepts", "Unlimited Revisions", "Style Guide"],
        "category_slug": "logo-design",
    },
    {
        "title": "Business Card Design",
        "subtitle": "Professional Business Card Design",
        "price": "From: 75.00 USD",
        "description": "Double sided business cards matched to your brand.",
        "features": ["Double Sided", "Print Ready PDF"],
        "category_slug": "business-card-design",
    },
    {
        "title": "Basic Website Package",
        "subtitle": "Simple Website Solution",
        "price": "From: 500.00 USD",
        "description": "A five page responsive website with contact form.",
        "features": ["5 Pages", "Responsive Layout", "Contact Form"],
        "category_slug": "websites",
        "featured": True,
    },
    {
        "title": "E-Commerce Website",
        "subtitle": "Complete Online Store Solution",
        "price": "From: 1500.00 USD",
        "description": "Online store with payment gateway and product management.",
        "features": ["Payment Gateway", "Inventory", "Order Emails"],
        "category_slug": "ecommerce-websites",
    },
    {
        "title": "Website Maintenance",
        "subtitle": "Keep Your Website Running Smoothly",
        "price": "From: 99.00 USD / month",
        "description": "Monthly updates, backups and uptime monitoring.",
        "features": ["Weekly Backups", "Plugin Updates", "Uptime Monitoring"],
        "category_slug": "website-maintenance",
    },
]

PLUGINS = [
    {
        "name": "WordPress SEO Booster",
        "slug": "wordpress-seo-booster",
        "short_description": "On-page SEO checks and sitemaps",
        "description": "Analyse every post for keywords, meta tags and readability.",
        "author": "Foxbeep",
        "version": "2.1.0",
        "price": "49.00 USD",
        "is_premium": True,
        "downloads": 1250,
        "tags": ["seo", "sitemap", "wordpress"],
        "category_slug": "seo",
        "featured": True,
    },
    {
        "name": "Contact Form Pro",
        "slug": "contact-form-pro",
        "short_description": "Drag and drop forms",
        "description": "Build contact forms with spam protection and email routing.",
        "author": "Foxbeep",
        "version": "1.4.2",
        "price": "Free",
        "is_premium": False,
        "downloads": 5400,
        "tags": ["forms", "contact"],
        "category_slug": "wordpress-plugins",
    },
    {
        "name": "WooCommerce Currency Switcher",
        "slug": "woocommerce-currency-switcher",
        "short_description": "Multi-currency prices for stores",
        "description": "Let shoppers browse your store in their own currency.",
        "author": "Foxbeep",
        "version": "3.0.1",
        "price": "29.00 USD",
        "is_premium": True,
        "downloads": 860,
        "tags": ["woocommerce", "currency"],
        "category_slug": "wordpress-plugins",
    },
]
