DEFAULT_SERVICES = [
    {
        "slug": "ceiling-fan-replacement",
        "name": "Ceiling Fan Replacement",
        "short_description": "Professional removal and installation of ceiling fans with proper electrical connections.",
        "full_description": "Upgrade your comfort with our professional ceiling fan replacement service. We safely remove your old fan and install your new one with precision, ensuring proper balance, secure mounting, and correct electrical connections. Whether you're upgrading to a more efficient model or changing your room's style, we've got you covered.",
        "icon": "Fan",
        "image": "https://images.unsplash.com/photo-1585771724684-38269d6639fd?w=800",
        "starting_price": 125,
        "price_note": "Fan not included",
        "duration": "1-2 hours",
        "features": [
            "Safe removal of existing fan",
            "Secure mounting bracket installation",
            "Proper electrical wiring",
            "Fan balancing and testing",
            "Remote/wall control setup",
            "Cleanup of work area"
        ],
        "process": [
            {"step": 1, "title": "Assessment", "description": "We inspect the existing wiring and ceiling structure"},
            {"step": 2, "title": "Removal", "description": "Carefully disconnect and remove the old ceiling fan"},
            {"step": 3, "title": "Installation", "description": "Mount the new fan bracket and assemble the fan"},
            {"step": 4, "title": "Testing", "description": "Balance the blades and test all speed/light settings"}
        ],
        "faq": [
            {
                "question": "Can you install a fan where there's currently a light?",
                "answer": "Yes! If there's existing electrical wiring, we can typically install a fan. We'll assess if the electrical box needs upgrading to support the fan's weight."
            },
            {
                "question": "Do I need to provide the ceiling fan?",
                "answer": "Yes, please have the fan ready for installation. We're happy to recommend brands and models if you need suggestions."
            }
        ],
        "related_services": ["light-fixture-replacement", "light-switches-replacement"],
        "is_active": True,
        "sort_order": 1
    },
    {
        "slug": "light-fixture-replacement",
        "name": "Light Fixture Replacement",
        "short_description": "Swap out dated fixtures for modern lighting that transforms your space.",
        "full_description": "Transform the look and feel of any room with a new light fixture. Our expert installation ensures your new chandelier, pendant, flush mount, or any other fixture is safely and securely installed. We handle all the electrical work so you can enjoy your beautiful new lighting worry-free.",
        "icon": "Lightbulb",
        "image": "https://images.unsplash.com/photo-1524484485831-a92ffc0de03f?w=800",
        "starting_price": 95,
        "price_note": "Fixture not included",
        "duration": "45 min - 1.5 hours",
        "features": [
            "Removal of existing fixture",
            "Secure mounting installation",
            "Proper wire connections",
            "Bulb installation & testing",
            "Smart dimmer compatibility check",
            "Cleanup included"
        ],
        "process": [
            {"step": 1, "title": "Power Off", "description": "Safely turn off power at the breaker"},
            {"step": 2, "title": "Remove Old Fixture", "description": "Disconnect and remove the existing light"},
            {"step": 3, "title": "Install New Fixture", "description": "Mount and wire your new light fixture"},
            {"step": 4, "title": "Test & Finish", "description": "Restore power and test all functions"}
        ],
        "faq": [
            {
                "question": "Can you install heavy chandeliers?",
                "answer": "Absolutely. For heavier fixtures, we ensure the electrical box is rated for the weight and may install additional support if needed."
            },
            {
                "question": "What if my wiring is old?",
                "answer": "We'll assess the wiring condition and let you know if any updates are needed for safety before proceeding."
            }
        ],
        "related_services": ["light-fixture-installation", "light-switches-replacement"],
        "is_active": True,
        "sort_order": 2
    },
    {
        "slug": "light-fixture-installation",
        "name": "Light Fixture Installation",
        "short_description": "New light fixture installation in locations without existing fixtures.",
        "full_description": "Want to add lighting to a new location? Our installation service covers everything from running new wiring to mounting your fixture. We'll work with your home's existing electrical system to bring light exactly where you need it, whether it's a new pendant over your kitchen island or recessed lighting in your living room.",
        "icon": "Sun",
        "image": "https://images.unsplash.com/photo-1513506003901-1e6a229e2d15?w=800",
        "starting_price": 175,
        "price_note": "May vary based on wiring requirements",
        "duration": "2-4 hours",
        "features": [
            "Site assessment and planning",
            "New electrical box installation",
            "Wiring from existing circuit",
            "Fixture mounting and connection",
            "Switch installation if needed",
            "Full testing and cleanup"
        ],
        "process": [
            {"step": 1, "title": "Consultation", "description": "Determine best location and wiring route"},
            {"step": 2, "title": "Rough-in Work", "description": "Install electrical box and run new wiring"},
            {"step": 3, "title": "Fixture Install", "description": "Mount and connect your new light fixture"},
            {"step": 4, "title": "Final Testing", "description": "Test all connections and switch operation"}
        ],
        "faq": [
            {
                "question": "Do I need a permit for new light installation?",
                "answer": "Simple fixture additions typically don't require permits, but we'll advise if your specific situation needs one."
            },
            {
                "question": "Can you install recessed lighting?",
                "answer": "Yes! We install all types of lighting including recessed, pendant, track, and more."
            }
        ],
        "related_services": ["light-fixture-replacement", "lighting-controls-installation"],
        "is_active": True,
        "sort_order": 3
    },
    {
        "slug": "light-switches-replacement",
        "name": "Light Switches Replacement/Upgrades",
        "short_description": "Upgrade to modern switches including dimmers, smart switches, and stylish designs.",
        "full_description": "Modernize your home with updated light switches. Whether you want sleek dimmer switches, convenient smart switches, or simply want to replace worn-out toggles, we provide safe and professional installation. Smart switch integration can add convenience and energy savings to your daily life.",
        "icon": "ToggleRight",
        "image": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
        "starting_price": 65,
        "price_note": "Per switch, switch not included",
        "duration": "20-45 minutes per switch",
        "features": [
            "Old switch removal",
            "Smart switch compatibility check",
            "Proper wiring connections",
            "Dimmer calibration",
            "Smart home app setup",
            "Multi-switch configurations"
        ],
        "process": [
            {"step": 1, "title": "Power Off", "description": "Safely disconnect power at breaker"},
            {"step": 2, "title": "Remove Old Switch", "description": "Disconnect and remove existing switch"},
            {"step": 3, "title": "Install & Wire", "description": "Connect new switch with proper wiring"},
            {"step": 4, "title": "Configure & Test", "description": "Set up smart features and test operation"}
        ],
        "faq": [
            {
                "question": "Do smart switches need special wiring?",
                "answer": "Many smart switches require a neutral wire. We'll check your wiring and recommend compatible switches for your home."
            },
            {
                "question": "Can you install 3-way smart switches?",
                "answer": "Yes, we handle 3-way and 4-way switch configurations for multi-location control."
            }
        ],
        "related_services": ["lighting-controls-installation", "light-fixture-replacement"],
        "is_active": True,
        "sort_order": 4
    },
    {
        "slug": "lighting-controls-installation",
        "name": "Lighting Controls Installation",
        "short_description": "Smart lighting systems, timers, motion sensors, and whole-home lighting control.",
        "full_description": "Take control of your home's lighting with our advanced lighting control installation services. From simple timers and motion sensors to complete smart home lighting systems, we can automate and optimize your lighting for convenience, security, and energy efficiency.",
        "icon": "Sliders",
        "image": "https://images.unsplash.com/photo-1545259741-2ea3ebf61fa3?w=800",
        "starting_price": 150,
        "price_note": "Varies based on system complexity",
        "duration": "1-3 hours",
        "features": [
            "Smart hub integration",
            "Motion sensor installation",
            "Timer switch setup",
            "Dimmer programming",
            "Scene configuration",
            "Mobile app setup"
        ],
        "process": [
            {"step": 1, "title": "System Design", "description": "Plan your lighting control setup"},
            {"step": 2, "title": "Hardware Install", "description": "Install switches, sensors, and controls"},
            {"step": 3, "title": "Programming", "description": "Configure scenes, schedules, and automations"},
            {"step": 4, "title": "Training", "description": "Walk you through using your new system"}
        ],
        "faq": [
            {
                "question": "Which smart home systems do you work with?",
                "answer": "We work with all major platforms including HomeKit, Google Home, Alexa, Lutron, and more."
            },
            {
                "question": "Can I control lights when away from home?",
                "answer": "Yes! With smart lighting controls, you can manage your lights from anywhere via smartphone."
            }
        ],
        "related_services": ["light-switches-replacement", "ring-camera-installation"],
        "is_active": True,
        "sort_order": 5
    },
    {
        "slug": "power-receptacle-repair",
        "name": "Power Receptacle Repair",
        "short_description": "Fix outlets that aren't working, have loose connections, or show signs of damage.",
        "full_description": "Non-working or damaged outlets can be frustrating and even dangerous. Our repair service diagnoses and fixes outlet issues including loose connections, worn contacts, tripped GFCI circuits, and more. We ensure your outlets are safe and functioning properly.",
        "icon": "Plug",
        "image": "https://images.unsplash.com/photo-1621905252507-b35492cc74b4?w=800",
        "starting_price": 85,
        "price_note": None,
        "duration": "30 min - 1 hour",
        "features": [
            "Diagnostic testing",
            "Loose connection repair",
            "GFCI reset/replacement",
            "Damaged outlet repair",
            "Wiring inspection",
            "Safety verification"
        ],
        "process": [
            {"step": 1, "title": "Diagnose", "description": "Test outlet and trace the issue"},
            {"step": 2, "title": "Power Off", "description": "Safely disconnect power to the circuit"},
            {"step": 3, "title": "Repair", "description": "Fix connections or replace damaged parts"},
            {"step": 4, "title": "Test", "description": "Verify proper function and safety"}
        ],
        "faq": [
            {
                "question": "Why did my outlet stop working suddenly?",
                "answer": "Common causes include tripped GFCI/breaker, loose wiring, or a worn outlet. We'll diagnose the exact cause."
            },
            {
                "question": "Is a warm outlet dangerous?",
                "answer": "A warm outlet can indicate a problem. Contact us to have it inspected as it could be a fire hazard."
            }
        ],
        "related_services": ["power-receptacle-replacement", "light-switches-replacement"],
        "is_active": True,
        "sort_order": 6
    },
    {
        "slug": "power-receptacle-replacement",
        "name": "Power Receptacle Replacement",
        "short_description": "Replace outdated outlets with modern, safer options including USB and GFCI outlets.",
        "full_description": "Upgrade your outlets for safety, convenience, and style. We replace old 2-prong outlets with grounded 3-prong, install GFCI protection in kitchens and bathrooms, add USB charging outlets, or simply update to match your new décor. All installations meet current electrical codes.",
        "icon": "Zap",
        "image": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800",
        "starting_price": 75,
        "price_note": "Per outlet, outlet not included",
        "duration": "20-40 minutes per outlet",
        "features": [
            "Old outlet removal",
            "USB outlet installation",
            "GFCI outlet installation",
            "Proper grounding verification",
            "Code-compliant installation",
            "Cover plate matching"
        ],
        "process": [
            {"step": 1, "title": "Power Off", "description": "Safely turn off the circuit breaker"},
            {"step": 2, "title": "Remove", "description": "Disconnect and remove old outlet"},
            {"step": 3, "title": "Install", "description": "Wire and mount new outlet securely"},
            {"step": 4, "title": "Verify", "description": "Test function and safety features"}
        ],
        "faq": [
            {
                "question": "Can you add grounding to 2-prong outlets?",
                "answer": "We can upgrade to grounded outlets if ground wire is available, or install GFCI protection as an alternative."
            },
            {
                "question": "Where do I need GFCI outlets?",
                "answer": "GFCI outlets are required near water sources: bathrooms, kitchens, garages, and outdoor areas."
            }
        ],
        "related_services": ["power-receptacle-repair", "light-switches-replacement"],
        "is_active": True,
        "sort_order": 7
    },
    {
        "slug": "ring-camera-installation",
        "name": "Ring Camera Installation",
        "short_description": "Professional installation of Ring doorbells, cameras, and security systems.",
        "full_description": "Enhance your home security with professional Ring device installation. We mount and configure Ring doorbells, indoor and outdoor cameras, and floodlight cameras. Our service includes optimal positioning for best coverage, proper wiring, and full app setup so you can monitor your home from day one.",
        "icon": "Camera",
        "image": "https://images.unsplash.com/photo-1558002038-1055907df827?w=800",
        "starting_price": 125,
        "price_note": "Device not included",
        "duration": "1-2 hours per device",
        "features": [
            "Optimal camera positioning",
            "Secure mounting",
            "Wired or wireless setup",
            "Doorbell transformer check",
            "Ring app configuration",
            "Motion zone setup"
        ],
        "process": [
            {"step": 1, "title": "Site Survey", "description": "Determine best placement for coverage"},
            {"step": 2, "title": "Install", "description": "Mount device and connect power/wiring"},
            {"step": 3, "title": "Configure", "description": "Set up Ring app and connect to WiFi"},
            {"step": 4, "title": "Optimize", "description": "Adjust motion zones and alerts"}
        ],
        "faq": [
            {
                "question": "Do I need existing doorbell wiring for Ring Doorbell?",
                "answer": "Wired installation provides constant power, but Ring Doorbells also work on battery. We can assess and recommend the best option."
            },
            {
                "question": "Can you install multiple Ring cameras?",
                "answer": "Absolutely! We install complete Ring security systems with multiple cameras and devices."
            }
        ],
        "related_services": ["lighting-controls-installation", "power-receptacle-replacement"],
        "is_active": True,
        "sort_order": 8
    }
]

DEFAULT_TESTIMONIALS = [
    {
        "name": "Maria Rodriguez",
        "location": "Downtown",
        "rating": 5,
        "text": "Absolutely fantastic service! They replaced all my outdated light switches with smart dimmers. The work was clean, professional, and completed faster than expected. My home feels so much more modern now.",
        "service": "Light Switches Replacement",
        "date": "2025-12-15"
    },
    {
        "name": "James Thompson",
        "location": "Westside",
        "rating": 5,
        "text": "Had three ceiling fans installed in one day. The team was punctual, courteous, and incredibly skilled. They even helped me understand how to use the remote controls. Highly recommend!",
        "service": "Ceiling Fan Replacement",
        "date": "2025-12-08"
    },
    {
        "name": "Sarah Chen",
        "location": "Northgate",
        "rating": 5,
        "text": "I was worried about installing my Ring doorbell and cameras, but Fix it, papa! made it so easy. They positioned everything perfectly and walked me through the app setup. I feel so much safer now.",
        "service": "Ring Camera Installation",
        "date": "2025-11-28"
    },
    {
        "name": "Michael Brooks",
        "location": "Eastbrook",
        "rating": 5,
        "text": "Professional, affordable, and reliable. They fixed two dead outlets and replaced my kitchen GFCI in under an hour. Great communication throughout. Will definitely use again!",
        "service": "Power Receptacle Repair",
        "date": "2025-11-20"
    },
    {
        "name": "Lisa Patel",
        "location": "Riverside",
        "rating": 5,
        "text": "The chandelier installation in my dining room was perfect. They took extra care to ensure it was level and secure. The cleanup was impeccable - you'd never know they were there!",
        "service": "Light Fixture Installation",
        "date": "2025-11-12"
    },
    {
        "name": "David Kim",
        "location": "Oak Hills",
        "rating": 5,
        "text": "Set up my whole-home Lutron lighting system. They programmed scenes for morning, evening, and movie night. The attention to detail was impressive. Worth every penny!",
        "service": "Lighting Controls Installation",
        "date": "2025-11-05"
    },
    {
        "name": "Jennifer Martinez",
        "location": "Lakewood",
        "rating": 5,
        "text": "Quick response for an urgent outlet issue. They diagnosed and fixed the problem within 30 minutes. Fair pricing and excellent work ethic. My go-to handyman from now on!",
        "service": "Power Receptacle Repair",
        "date": "2025-10-28"
    },
    {
        "name": "Robert Wilson",
        "location": "Greendale",
        "rating": 5,
        "text": "Replaced all the old light fixtures in my home office. The new pendant lights look amazing and the work was completed exactly as promised. True professionals!",
        "service": "Light Fixture Replacement",
        "date": "2025-10-15"
    }
]

DEFAULT_PAGE_CONTENT = {
    "hero": {
        "badge_text": "Trusted by 500+ homeowners in the Metro Area",
        "headline": "Expert Electrical &",
        "headline_highlight": "Handyman Services",
        "subheadline": "From ceiling fans to smart home installations, we handle all your electrical needs with precision, reliability, and fair pricing. Licensed professionals, guaranteed satisfaction.",
        "trust_points": ["Licensed & Insured", "Same-Day Service", "Satisfaction Guaranteed"]
    },
    "services_page": {
        "badge_text": "Our Services",
        "headline": "Professional Electrical &",
        "headline_highlight": "Handyman Solutions",
        "description": "From quick repairs to complete installations, we provide expert service for all your home electrical needs. Click any service below to learn more and schedule an appointment."
    },
    "about": {
        "hero_headline": "Your Trusted Partner for",
        "hero_headline_highlight": "Home Electrical Needs",
        "hero_description": "Fix it, papa! was founded with a simple mission: to provide homeowners with reliable, professional, and affordable electrical and handyman services. We believe every home deserves to have working, safe, and modern electrical systems.",
        "hero_description_secondary": "What started as a one-person operation has grown into a trusted local service, but our core values remain the same. We treat every home like our own, every customer like family.",
        "hero_image_url": "",
        "established_year": "2015",
        "company_story": "With over a decade of experience in the electrical trade, our founder saw a gap in the market: homeowners needed reliable, fairly-priced help with everyday electrical tasks that didn't require a full contractor.",
        "story_paragraph_2": "From replacing a ceiling fan to installing a complete smart home lighting system, we fill that need. We bring professional expertise to every job, whether it's a 30-minute outlet repair or an all-day installation project.",
        "years_experience": "10+",
        "jobs_completed": "1,200+",
        "happy_customers": "500+",
        "average_rating": "5.0",
        "certifications": [
            "Licensed Electrical Contractor",
            "Fully Insured & Bonded",
            "EPA Certified",
            "OSHA Safety Trained",
            "Smart Home Certified",
            "Ring Pro Installer"
        ],
        "values": [
            {"icon": "Shield", "title": "Reliability", "description": "We show up on time, every time. When we commit to a job, you can count on us to see it through with professionalism."},
            {"icon": "Heart", "title": "Integrity", "description": "Honest pricing, transparent communication, and doing the right thing even when no one is watching."},
            {"icon": "Target", "title": "Quality", "description": "We take pride in our work. Every installation, repair, and upgrade is done to the highest standards."},
            {"icon": "Clock", "title": "Efficiency", "description": "Your time is valuable. We work efficiently without cutting corners, completing jobs promptly and correctly."}
        ],
        "why_choose_us": [
            {"title": "Transparent Pricing", "description": "No hidden fees or surprise charges. We provide detailed quotes upfront."},
            {"title": "Clean & Respectful", "description": "We treat your home with care, wearing shoe covers and cleaning up after every job."},
            {"title": "Guaranteed Work", "description": "All our work is backed by a satisfaction guarantee. If it's not right, we'll fix it."},
            {"title": "Fast Response", "description": "Same-day and next-day appointments available. We know electrical issues can't wait."}
        ],
        "cta_headline": "Let's Work Together",
        "cta_description": "Whether you have a quick question or need to schedule a service, we're here to help."
    },
    "cta": {
        "headline": "Ready to Get Your Project",
        "headline_highlight": "Done Right?",
        "description": "Get a free quote in minutes. Our friendly team is ready to help with any electrical or handyman project, big or small.",
        "trust_note": "No obligation • Free estimates • Same-day response"
    }
}

# Page keys editable from the admin content screen
EDITABLE_PAGE_KEYS = ["hero", "about", "cta"]

DEFAULT_LEGAL_PAGES = {
    "privacy": {
        "title": "Privacy Policy",
        "content": """# Privacy Policy

**Last updated: January 2024**

## Introduction

We respect your privacy and are committed to protecting your personal data. This privacy policy explains how we collect, use, and safeguard your information when you visit our website or use our services.

## Information We Collect

### Personal Information

- Name and contact details (email, phone number, address)
- Service requests and preferences
- Communication history with our team

### Automatically Collected Information

- Browser type and version
- Pages visited and time spent
- Device information

## How We Use Your Information

We use your information to:

- Provide and improve our services
- Respond to your inquiries and service requests
- Send appointment confirmations and updates
- Process payments

## Data Security

We implement appropriate security measures to protect your personal information against unauthorized access, alteration, or destruction.

## Your Rights

You have the right to:

- Access your personal data
- Request correction of inaccurate data
- Request deletion of your data
- Opt-out of marketing communications

## Contact Us

If you have questions about this privacy policy, please contact us at our listed phone number or email address."""
    },
    "terms": {
        "title": "Terms of Service",
        "content": """# Terms of Service

**Last updated: January 2024**

## Agreement to Terms

By accessing or using our services, you agree to be bound by these Terms of Service.

## Services

We provide electrical and handyman services for residential properties. All services are subject to availability and scheduling.

## Pricing and Payment

- Prices quoted are estimates and may vary based on actual work required
- Payment is due upon completion of services unless otherwise agreed
- We accept major credit cards, cash, and checks

## Warranties and Guarantees

- All work comes with a satisfaction guarantee
- If you are not satisfied with our work, we will return to address the issue at no additional charge
- Warranty period is 90 days from completion of service

## Limitations of Liability

We shall not be liable for:

- Pre-existing conditions not disclosed before service
- Issues arising from customer-provided materials
- Consequential or indirect damages

## Cancellation Policy

- Appointments can be rescheduled with 24 hours notice
- Same-day cancellations may incur a service fee

## Changes to Terms

We reserve the right to modify these terms at any time. Continued use of our services constitutes acceptance of updated terms.

## Contact Us

For questions about these terms, please contact us at our listed phone number or email address."""
    }
}

TRUST_INDICATORS = [
    {"icon": "Users", "value": "500+", "label": "Happy Customers", "description": "Homeowners trust us"},
    {"icon": "Clock", "value": "10+", "label": "Years Experience", "description": "In the industry"},
    {"icon": "ThumbsUp", "value": "98%", "label": "Satisfaction Rate", "description": "5-star reviews"},
    {"icon": "Award", "value": "1,200+", "label": "Jobs Completed", "description": "And counting"}
]
