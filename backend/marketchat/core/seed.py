"""Prototype catalog data: products and the suppliers listing each of them."""

DUMMY_PRODUCTS = [
    {"id": "p1", "name": "Fresh Onions", "category": "Vegetables", "supplier": "A-Grade Veggies", "mrp": 25, "unit": "kg", "imageUrl": "images/onion.png"},
    {"id": "p2", "name": "Premium Tomatoes", "category": "Vegetables", "supplier": "Green Farms", "mrp": 40, "unit": "kg", "imageUrl": "images/tomato.png"},
    {"id": "p3", "name": "Paneer Blocks", "category": "Dairy", "supplier": "Dairy Delights", "mrp": 250, "unit": "kg", "imageUrl": "images/paneer.png"},
    {"id": "p4", "name": "Chaat Masala", "category": "Spices", "supplier": "Spice Mart", "mrp": 80, "unit": "pack", "imageUrl": "images/chaat-masala.png"},
    {"id": "p5", "name": "Potatoes (New Crop)", "category": "Vegetables", "supplier": "Farm Fresh Co.", "mrp": 20, "unit": "kg", "imageUrl": "images/potato.png"},
    {"id": "p6", "name": "Coriander Leaves", "category": "Vegetables", "supplier": "Local Greens", "mrp": 15, "unit": "bunch", "imageUrl": "images/coriander.png"},
    {"id": "p7", "name": "Carrots", "category": "Vegetables", "supplier": "Veggie Hub", "mrp": 28, "unit": "kg", "imageUrl": "images/carrot.png"},
    {"id": "p8", "name": "Capsicum", "category": "Vegetables", "supplier": "Fresh Farm", "mrp": 34, "unit": "kg", "imageUrl": "images/capsicum.png"},
    {"id": "p9", "name": "Black Pepper", "category": "Spices", "supplier": "Spice Hub", "mrp": 88, "unit": "pack", "imageUrl": "images/black-pepper.png"},
    {"id": "p10", "name": "Cumin Powder", "category": "Spices", "supplier": "Masala Mart", "mrp": 92, "unit": "pack", "imageUrl": "images/cumin.png"},
    {"id": "p11", "name": "Cheese Cubes", "category": "Dairy", "supplier": "Dairy World", "mrp": 310, "unit": "kg", "imageUrl": "images/cheese.png"},
    {"id": "p12", "name": "Milk (Full Cream)", "category": "Dairy", "supplier": "Dairy Fresh", "mrp": 58, "unit": "liter", "imageUrl": "images/milk.png"},
    {"id": "p13", "name": "Wheat Flour", "category": "Grains", "supplier": "Grain Basket", "mrp": 46, "unit": "kg", "imageUrl": "images/wheat-flour.png"},
    {"id": "p14", "name": "Rice (Basmati)", "category": "Grains", "supplier": "Grain House", "mrp": 72, "unit": "kg", "imageUrl": "images/rice.png"},
]

# product id -> supplier listings (distance in km)
DUMMY_SUPPLIER_LISTINGS = {
    "p1": [
        {"supplierId": "s1", "supplierName": "A-Grade Veggies", "price": 24, "unit": "kg", "distance": 3, "rating": 4.5},
        {"supplierId": "s2", "supplierName": "Fresh Fields", "price": 25, "unit": "kg", "distance": 5, "rating": 4.1},
    ],
    "p2": [
        {"supplierId": "s3", "supplierName": "Green Farms", "price": 38, "unit": "kg", "distance": 2, "rating": 4.7},
        {"supplierId": "s4", "supplierName": "Veggie Point", "price": 40, "unit": "kg", "distance": 4, "rating": 4.2},
    ],
    "p3": [
        {"supplierId": "s5", "supplierName": "Dairy Delights", "price": 245, "unit": "kg", "distance": 6, "rating": 4.6},
    ],
    "p4": [
        {"supplierId": "s6", "supplierName": "Spice Mart", "price": 75, "unit": "pack", "distance": 1, "rating": 4.3},
    ],
    "p5": [
        {"supplierId": "s7", "supplierName": "Farm Fresh Co.", "price": 19, "unit": "kg", "distance": 2.5, "rating": 4.0},
    ],
    "p6": [
        {"supplierId": "s8", "supplierName": "Local Greens", "price": 14, "unit": "bunch", "distance": 1.2, "rating": 4.4},
    ],
    "p7": [
        {"supplierId": "s9", "supplierName": "Veggie Hub", "price": 28, "unit": "kg", "distance": 3, "rating": 4.2},
    ],
    "p8": [
        {"supplierId": "s10", "supplierName": "Fresh Farm", "price": 34, "unit": "kg", "distance": 2.8, "rating": 4.4},
    ],
    "p9": [
        {"supplierId": "s11", "supplierName": "Spice Hub", "price": 88, "unit": "pack", "distance": 4, "rating": 4.5},
    ],
    "p10": [
        {"supplierId": "s12", "supplierName": "Masala Mart", "price": 92, "unit": "pack", "distance": 3.5, "rating": 4.6},
    ],
    "p11": [
        {"supplierId": "s13", "supplierName": "Dairy World", "price": 310, "unit": "kg", "distance": 5, "rating": 4.3},
    ],
    "p12": [
        {"supplierId": "s14", "supplierName": "Dairy Fresh", "price": 58, "unit": "liter", "distance": 3.7, "rating": 4.2},
    ],
    "p13": [
        {"supplierId": "s15", "supplierName": "Grain Basket", "price": 46, "unit": "kg", "distance": 4.5, "rating": 4.1},
    ],
    "p14": [
        {"supplierId": "s16", "supplierName": "Grain House", "price": 72, "unit": "kg", "distance": 6, "rating": 4.4},
    ],
}
