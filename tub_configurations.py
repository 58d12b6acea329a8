# tub_configurations.py

def generate_configurations(raw_config):
    """Generate full tub configuration from a few sampled parameters."""

    # Constants
    lb, inch = 1.0, 1.0
    ft = 12 * inch
    psi = lb / inch ** 2
    ksi = 1000 * psi
    mm = inch / 25.4

    # Extract parameters
    tub_length = raw_config["tub_length_in"] * inch
    tub_width = raw_config["tub_width_in"] * inch
    tub_height = raw_config["tub_height_in"] * inch
    water_depth = raw_config["water_depth_in"] * inch
    n_transverse = raw_config.get("n_transverse", 3)
    t_bottom_mm = raw_config.get("bottom_thickness_mm", 19)  # 3/4" sheet
    t_side_mm = raw_config.get("side_thickness_mm", t_bottom_mm)
    extr_size_mm = raw_config.get("extrusion_size_mm", 25)  # 25x25 slot profile

    # Frame sits one extrusion width outside the tub on each side
    frame_clearance = extr_size_mm * mm

    mdf_grade_to_modulus = {
        "extira": 400 * ksi,
        "standard": 350 * ksi,
    }
    mdf_E = mdf_grade_to_modulus[raw_config.get("mdf_grade", "extira")]

    config = {
        "tub": {
            "L_tub_in": tub_length,
            "W_tub_in": tub_width,
            "H_tub_in": tub_height,
            "t_mdf_bottom_in": t_bottom_mm * mm,
            "t_mdf_side_in": t_side_mm * mm,
            "water_depth_in": water_depth,
            "n_transverse": n_transverse,
            "n_long_side_posts": raw_config.get("n_long_side_posts", 0),
            "n_short_side_posts": raw_config.get("n_short_side_posts", 0),
        },

        "frame": {
            "L_frame_in": tub_length + 2 * frame_clearance,
            "W_frame_in": tub_width + 2 * frame_clearance,
            "H_frame_in": tub_height + raw_config.get("frame_leg_ft", 0.5) * ft,
            "extr_size_mm": extr_size_mm,
        },

        "materials": {
            "water": {"gamma_psi_per_in": 0.0361 * psi / inch},
            "mdf_extira": {"E_psi": mdf_E},
            "aluminum_2525": {
                "E_psi": 10000 * ksi,
                "I_in4": 0.0192 * inch ** 4,
                "c_in": extr_size_mm * mm / 2,
            },
        },
    }

    return config
