"""Status effects, item actions, equipment, consumables, items and inventory."""